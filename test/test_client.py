from sedotmp_client.exceptions import AuthenticationError
from sedotmp_client.endpoints import Content, Platform
from sedotmp_client.client import SedoTmpClient
from sedotmp_client.auth import TokenManager
from unittest.mock import MagicMock, patch
import pytest
import json


def make_response(payload, status_code=200, content_type="application/json"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = json.dumps(payload).encode("utf-8")
    resp.json.return_value = payload
    resp.headers = {"Content-Type": content_type}
    resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def http_client():
    client = MagicMock()
    client.post.return_value = make_response({"access_token": "reusable-token"})
    return client


@pytest.fixture
def client(http_client):
    return SedoTmpClient(
        client_id="test-client-id",
        client_secret="test-client-secret",
        http_client=http_client,
    )


@patch("sedotmp_client.client.Platform")
@patch("sedotmp_client.client.Content")
def test_client_initializes_sub_clients(mock_content, mock_platform):
    """
    Ensure SedoTmpClient hands the same TokenManager to both sub-clients.
    """
    token_manager = MagicMock()
    client = SedoTmpClient(token_manager=token_manager)

    assert client.token_manager is token_manager
    mock_content.assert_called_once_with(token_manager=token_manager)
    mock_platform.assert_called_once_with(token_manager=token_manager)
    assert client.content == mock_content.return_value
    assert client.platform == mock_platform.return_value


def test_client_builds_token_manager(client, http_client):
    assert isinstance(client.token_manager, TokenManager)
    assert isinstance(client.content, Content)
    assert isinstance(client.platform, Platform)
    assert client.content.token_manager is client.platform.token_manager
    assert client.token_manager.http_client is http_client


def test_client_passes_configuration(http_client):
    client = SedoTmpClient(
        client_id="id",
        client_secret="secret",
        api_version="v2",
        base_url="https://custom.api.com",
        auth_url="https://custom.auth.com/token",
        http_client=http_client,
    )
    tm = client.token_manager
    assert tm.api_version == "v2"
    assert tm.base_url == "https://custom.api.com"
    assert tm.auth_url == "https://custom.auth.com/token"


def test_get_access_token_authenticates_once(client, http_client):
    assert client.has_access_token() is False
    assert client.get_access_token() == "reusable-token"
    assert client.get_access_token() == "reusable-token"
    http_client.post.assert_called_once()
    assert client.has_access_token() is True


def test_set_access_token(client, http_client):
    result = client.set_access_token("custom-token-789")

    assert result is client
    assert client.get_access_token() == "custom-token-789"
    http_client.post.assert_not_called()


def test_token_reused_across_resources(client, http_client):
    http_client.request.side_effect = [
        make_response([{"id": "1", "name": "Category 1"}]),
        make_response({"campaigns": [{"id": "1"}]}),
    ]

    categories = client.content.get_categories()
    campaigns = client.platform.get_content_campaigns(0)

    assert categories[0]["name"] == "Category 1"
    assert "campaigns" in campaigns
    http_client.post.assert_called_once()
    assert http_client.request.call_count == 2
    for call in http_client.request.call_args_list:
        assert call.kwargs["headers"]["Authorization"] == (
            "Bearer reusable-token"
        )


def test_authentication_failure_blocks_resource_call(client, http_client):
    http_client.post.return_value = make_response(
        {"error": "unauthorized"}, status_code=401
    )

    with pytest.raises(AuthenticationError):
        client.content.get_categories()

    assert client.has_access_token() is False
    http_client.request.assert_not_called()
