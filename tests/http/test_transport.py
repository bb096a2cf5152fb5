"""Tests for the HTTP transport."""

from unittest import mock

import pytest
import requests

from gabapi.exceptions import HTMLResponseError, ResponseParseError, TransportError
from gabapi.http.request_options import build_request_options
from gabapi.http.transport import ResponseEnvelope, Transport


@pytest.fixture
def descriptor():
    return build_request_options("GET", "/me", "token_123")


class TestResponseEnvelope:
    """Tests for ResponseEnvelope."""

    @pytest.mark.parametrize(
        "code, success",
        [(199, False), (200, True), (204, True), (299, True), (300, False), (404, False)],
    )
    def test_success_iff_2xx(self, code, success):
        assert ResponseEnvelope.from_status(code, "", None).success is success

    def test_to_dict(self):
        envelope = ResponseEnvelope.from_status(200, "OK", {"id": 1})

        assert envelope.to_dict() == {
            "success": True,
            "message": "OK",
            "code": 200,
            "data": {"id": 1},
        }


class TestTransport:
    """Tests for Transport class."""

    def test_transport_creates_session(self):
        transport = Transport()

        assert isinstance(transport.session, requests.Session)
        assert transport.timeout is None
        transport.close()

    def test_send_issues_one_request(self, transport, mock_session, descriptor, make_response):
        mock_session.request.return_value = make_response(200, {"username": "gab"})

        envelope = transport.send(descriptor)

        mock_session.request.assert_called_once_with(
            "GET",
            "https://api.gab.com/v1.0/me",
            headers=descriptor.headers,
            data=None,
            timeout=None,
            allow_redirects=False,
        )
        assert envelope == ResponseEnvelope(
            success=True, message="OK", code=200, data={"username": "gab"}
        )

    def test_send_passes_timeout(self, mock_session, descriptor):
        transport = Transport(session=mock_session, timeout=5)

        transport.send(descriptor)

        assert mock_session.request.call_args[1]["timeout"] == 5

    def test_http_error_resolves_with_failure_envelope(
        self, transport, mock_session, descriptor, make_response
    ):
        """4xx responses are data, not exceptions."""
        mock_session.request.return_value = make_response(404, {"error": "not found"})

        envelope = transport.send(descriptor)

        assert envelope.success is False
        assert envelope.code == 404
        assert envelope.message == "Not Found"
        assert envelope.data == {"error": "not found"}

    def test_server_error_resolves_with_failure_envelope(
        self, transport, mock_session, descriptor, make_response
    ):
        mock_session.request.return_value = make_response(500, {"message": "down"})

        envelope = transport.send(descriptor)

        assert envelope.success is False
        assert envelope.code == 500

    def test_empty_body_yields_none(self, transport, mock_session, make_response):
        mock_session.request.return_value = make_response(204)
        descriptor = build_request_options("DELETE", "/users/1/follow", "token")

        envelope = transport.send(descriptor)

        assert envelope.success is True
        assert envelope.data is None

    def test_html_body_raises_html_error(
        self, transport, mock_session, descriptor, make_response
    ):
        mock_session.request.return_value = make_response(
            200, raw=b"\n<!DOCTYPE html>\n<html><body>Error</body></html>"
        )

        with pytest.raises(HTMLResponseError) as exc_info:
            transport.send(descriptor)

        assert exc_info.value.status_code == 200
        assert "<html>" in exc_info.value.body

    def test_lowercase_doctype_is_detected(
        self, transport, mock_session, descriptor, make_response
    ):
        mock_session.request.return_value = make_response(400, raw=b"<!doctype html><p>x</p>")

        with pytest.raises(HTMLResponseError):
            transport.send(descriptor)

    def test_invalid_json_raises_parse_error(
        self, transport, mock_session, descriptor, make_response
    ):
        mock_session.request.return_value = make_response(200, raw=b"{not json")

        with pytest.raises(ResponseParseError, match="Invalid JSON") as exc_info:
            transport.send(descriptor)

        assert not isinstance(exc_info.value, HTMLResponseError)
        assert exc_info.value.body == "{not json"

    def test_invalid_utf8_raises_parse_error(
        self, transport, mock_session, descriptor, make_response
    ):
        mock_session.request.return_value = make_response(200, raw=b"\xff\xfe")

        with pytest.raises(ResponseParseError, match="UTF-8"):
            transport.send(descriptor)

    def test_connection_error_raises_transport_error(
        self, transport, mock_session, descriptor
    ):
        error = requests.ConnectionError("Name or service not known")
        mock_session.request.side_effect = error

        with pytest.raises(TransportError, match="Name or service not known") as exc_info:
            transport.send(descriptor)

        assert exc_info.value.__cause__ is error

    def test_body_override_updates_content_length(self, transport, mock_session):
        descriptor = build_request_options("POST", "/posts", "token", {"body": "a"})

        transport.send(descriptor, body='{"body": "é"}')

        kwargs = mock_session.request.call_args[1]
        assert kwargs["data"] == '{"body": "é"}'.encode("utf-8")
        assert kwargs["headers"]["Content-Length"] == str(len(kwargs["data"]))

    def test_body_override_sets_content_type(self, transport, mock_session):
        descriptor = build_request_options("GET", "/me", "token")
        assert "Content-Type" not in descriptor.headers

        transport.send(descriptor, body="{}")

        headers = mock_session.request.call_args[1]["headers"]
        assert headers["Content-Type"] == "application/json"
        assert headers["Content-Length"] == "2"

    def test_send_does_not_mutate_descriptor_headers(self, transport, descriptor):
        headers = dict(descriptor.headers)

        transport.send(descriptor, body="{}")

        assert descriptor.headers == headers

    def test_close_only_closes_owned_session(self, mock_session):
        Transport(session=mock_session).close()
        mock_session.close.assert_not_called()

        with mock.patch("requests.Session") as session_class:
            with Transport():
                pass
            session_class.return_value.close.assert_called_once()
