from .content import Content
from .platform import Platform

__all__ = ["Content", "Platform"]
