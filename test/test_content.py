from sedotmp_client.endpoints.content import Content
from sedotmp_client.exceptions import ApiCallError
from unittest.mock import MagicMock, patch
import requests
import pytest


@pytest.fixture
def token_manager():
    tm = MagicMock()
    tm.get_token.return_value = "valid_token"
    tm.base_url = "https://api.sedotmp.com"
    tm.api_version = "v1"
    return tm


@patch.object(Content, "make_request")
def test_get_categories_calls_make_request(mock_make, token_manager):
    """
    Ensure get_categories() targets the content segment and returns
    the decoded body untouched.
    """
    mock_make.return_value = [{"id": "1", "name": "Category 1"}]

    api = Content(token_manager=token_manager)
    result = api.get_categories()

    assert result == [{"id": "1", "name": "Category 1"}]
    mock_make.assert_called_once()
    args = mock_make.call_args
    assert args.args == (
        "GET", "https://api.sedotmp.com/content/v1/categories"
    )
    assert "categories" in args.kwargs["operation"]


def test_get_categories_decodes_response(token_manager):
    resp = MagicMock()
    resp.content = (
        b'[{"id": "1", "name": "Category 1"}, {"id": "2", "name": "Category 2"}]'
    )
    resp.headers = {"Content-Type": "application/json"}
    token_manager.http_client.request.return_value = resp

    categories = Content(token_manager=token_manager).get_categories()

    assert len(categories) == 2
    assert categories[0]["name"] == "Category 1"


def test_get_categories_failure(token_manager):
    token_manager.http_client.request.side_effect = (
        requests.exceptions.ConnectionError("down")
    )

    with pytest.raises(
        ApiCallError, match="Failed to fetch categories from SedoTMP API"
    ):
        Content(token_manager=token_manager).get_categories()
