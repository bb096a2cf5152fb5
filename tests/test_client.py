"""Tests for GabAPIClient."""

import json
from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from gabapi import GabAPIClient, GabClientConfig, RedirectRequest
from gabapi.exceptions import (
    HTMLResponseError,
    InvalidParameterError,
    InvalidURLError,
)
from gabapi.http.transport import Transport
from gabapi.resources import CurrentUser, Groups, Popular, Posts, Users

CLIENT_ID = "abc"
SECRET = "shh"
DEFAULT_SCOPES = [
    GabAPIClient.SCOPES["READ"],
    GabAPIClient.SCOPES["WRITE_POST"],
    GabAPIClient.SCOPES["ENGAGE"],
    GabAPIClient.SCOPES["ENGAGE_USER"],
    GabAPIClient.SCOPES["NOTIFICATIONS"],
]


class TestGabAPIClient:
    """Tests for GabAPIClient class."""

    @pytest.fixture
    def gab(self, transport):
        client = GabAPIClient(CLIENT_ID, SECRET, transport=transport)
        client.set_scopes(DEFAULT_SCOPES)
        client.redirect_uri = "http://www.example.com"
        return client

    def test_client_initialization(self):
        """GabAPIClient initializes with credentials and no OAuth settings."""
        client = GabAPIClient(CLIENT_ID, SECRET)

        assert client.client_id == CLIENT_ID
        assert client.secret == SECRET
        assert client.redirect_uri is None
        assert client.scopes == []
        assert isinstance(client.transport, Transport)
        assert isinstance(client.current_user, CurrentUser)
        assert isinstance(client.users, Users)
        assert isinstance(client.popular, Popular)
        assert isinstance(client.posts, Posts)
        assert isinstance(client.groups, Groups)
        client.close()

    @pytest.mark.parametrize("client_id, secret", [("", SECRET), (CLIENT_ID, ""), (None, SECRET)])
    def test_client_rejects_invalid_credentials(self, client_id, secret):
        with pytest.raises(InvalidParameterError):
            GabAPIClient(client_id, secret)

    def test_class_constants(self):
        assert GabAPIClient.VERSION == "1.0"
        assert GabAPIClient.REQUESTS_PER_MINUTE == 60
        assert GabAPIClient.ACCEPTED_METHODS == ("GET", "POST", "DELETE")
        assert GabAPIClient.SCOPES["ENGAGE"] == "engage-post"

    def test_set_secret_returns_self(self, gab):
        assert gab.set_secret("test") is gab
        assert gab.secret == "test"

    def test_set_client_id_returns_self(self, gab):
        assert gab.set_client_id("test") is gab
        assert gab.client_id == "test"

    def test_setters_validate(self, gab):
        with pytest.raises(InvalidParameterError):
            gab.secret = ""
        with pytest.raises(InvalidParameterError):
            gab.client_id = "   "

        assert gab.secret == SECRET
        assert gab.client_id == CLIENT_ID

    def test_invalid_redirect_uri(self, gab):
        with pytest.raises(InvalidURLError, match="Invalid URL: test"):
            gab.set_redirect_uri("test")

        assert gab.redirect_uri == "http://www.example.com/"

    def test_valid_redirect_uri_is_normalized(self, gab):
        assert gab.set_redirect_uri("http://www.example.com") is gab
        assert gab.redirect_uri == "http://www.example.com/"

    def test_set_scopes_returns_self(self, gab):
        assert gab.set_scopes(DEFAULT_SCOPES) is gab
        assert gab.scopes == DEFAULT_SCOPES

    def test_set_scopes_is_idempotent(self, gab):
        gab.set_scopes(["read", "write-post"])
        gab.set_scopes(["read", "write-post"])

        assert gab.scopes == ["read", "write-post"]

    def test_scopes_getter_returns_copy(self, gab):
        gab.scopes.append("read")

        assert gab.scopes == DEFAULT_SCOPES

    def test_set_scopes_rejects_non_sequence(self, gab):
        with pytest.raises(InvalidParameterError, match="scopes"):
            gab.scopes = "read"

    def test_get_scopes_for_request(self, gab):
        gab.scopes = ["read", "write-post"]

        assert gab.get_scopes_for_request() == "read write-post"

    def test_authorization_url(self, gab):
        gab.scopes = ["read"]

        url = gab.authorization_url

        assert url.startswith("https://api.gab.com/oauth/authorize?")
        assert url.count("client_id=abc") == 1
        assert url.count("redirect_uri=http%3A%2F%2Fwww.example.com") == 1
        assert url.count("scope=read") == 1

    def test_authorization_url_requires_redirect_uri(self, transport):
        client = GabAPIClient(CLIENT_ID, SECRET, transport=transport).set_scopes(["read"])

        with pytest.raises(InvalidParameterError, match="redirect_uri"):
            client.authorization_url

    def test_config_snapshot_is_replaced_not_mutated(self, gab):
        before = gab.config

        gab.scopes = ["read"]

        assert before.scopes == tuple(DEFAULT_SCOPES)
        assert gab.config.scopes == ("read",)

    def test_from_config(self, transport):
        config = GabClientConfig(
            client_id="id", secret="s", redirect_uri="https://example.com", scopes=["read"]
        )

        client = GabAPIClient.from_config(config, transport=transport)

        assert client.config is config
        assert client.redirect_uri == "https://example.com/"
        assert client.transport is transport

    def test_exchange_authorization_code(self, gab, mock_session, make_response):
        mock_session.request.return_value = make_response(
            200, {"expires_in": 3600, "access_token": "A", "refresh_token": "R"}
        )

        token = gab.exchange_authorization_code("code")

        body = json.loads(mock_session.request.call_args[1]["data"])
        assert body["redirect_uri"] == "http://www.example.com/"
        assert token.access_token == "A"
        expected = datetime.now(timezone.utc) + timedelta(seconds=3600)
        assert abs((token.expiration_date - expected).total_seconds()) < 1

    def test_handle_authorization_redirect_request(self, gab, mock_session, make_response):
        mock_session.request.return_value = make_response(
            200, {"expires_in": 60, "access_token": "A", "refresh_token": "R"}
        )
        request = RedirectRequest(
            url="/?code=the_code", headers={"host": "www.example.com"}
        )

        token = gab.handle_authorization_redirect_request(request)

        body = json.loads(mock_session.request.call_args[1]["data"])
        assert body["code"] == "the_code"
        assert token.refresh_token == "R"

    def test_refresh_access_token_sends_current_scopes(
        self, gab, mock_session, make_response
    ):
        mock_session.request.return_value = make_response(
            200, {"expires_in": 60, "access_token": "A2", "refresh_token": "R2"}
        )
        gab.scopes = ["read"]

        token = gab.refresh_access_token("R")

        body = json.loads(mock_session.request.call_args[1]["data"])
        assert body["scope"] == "read"
        assert body["grant_type"] == "refresh_token"
        assert token.access_token == "A2"

    def test_resource_call_returns_envelope(self, gab, mock_session, make_response):
        mock_session.request.return_value = make_response(404, {"message": "nope"})

        envelope = gab.users.fetch_user("token", "missing")

        assert envelope.success is False
        assert envelope.code == 404

    def test_resource_call_html_page_raises(self, gab, mock_session, make_response):
        mock_session.request.return_value = make_response(
            400, raw=b"<!DOCTYPE html><html></html>"
        )

        with pytest.raises(HTMLResponseError):
            gab.current_user.fetch("token")

    def test_context_manager_closes_owned_transport(self):
        with mock.patch("gabapi.client.Transport") as transport_class:
            with GabAPIClient(CLIENT_ID, SECRET):
                pass

        transport_class.return_value.close.assert_called_once()

    def test_close_leaves_injected_transport_open(self, mock_session):
        transport = Transport(session=mock_session)

        GabAPIClient(CLIENT_ID, SECRET, transport=transport).close()

        mock_session.close.assert_not_called()
