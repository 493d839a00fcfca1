import json
from unittest.mock import patch

import pytest
import requests
from django.test import override_settings

from backend.client import BackendConfigError, BackendError, api_delete, api_get, api_post

BACKEND = dict(
    BACKEND_ENDPOINT="https://cloud.example.com/v1/",
    BACKEND_PROJECT_ID="proj",
    BACKEND_API_KEY="secret-key",
    BACKEND_DATABASE_ID="db1",
    BACKEND_TIMEOUT_SECONDS=7,
)


def _response(status, body=None):
    r = requests.Response()
    r.status_code = status
    r._content = json.dumps(body).encode() if body is not None else b""
    r.url = "https://cloud.example.com/v1/databases/db1/x"
    return r


@override_settings(**BACKEND)
def test_get_builds_url_and_headers():
    with patch("backend.client.requests.request", return_value=_response(200, {"documents": []})) as req:
        assert api_get("collections/loc/documents", params={"a": 1}) == {"documents": []}
    args, kwargs = req.call_args
    assert args == ("GET", "https://cloud.example.com/v1/databases/db1/collections/loc/documents")
    assert kwargs["headers"]["X-Appwrite-Project"] == "proj"
    assert kwargs["headers"]["X-Appwrite-Key"] == "secret-key"
    assert "Content-Type" not in kwargs["headers"]
    assert kwargs["params"] == {"a": 1}
    assert kwargs["timeout"] == 7


@override_settings(**BACKEND)
def test_post_sends_json_body():
    with patch("backend.client.requests.request", return_value=_response(201, {"$id": "n1"})) as req:
        assert api_post("collections/loc/documents", {"data": {"Latitude": 1.0}}) == {"$id": "n1"}
    kwargs = req.call_args.kwargs
    assert kwargs["json"] == {"data": {"Latitude": 1.0}}
    assert kwargs["headers"]["Content-Type"] == "application/json"


@override_settings(**BACKEND)
def test_http_error_uses_backend_message():
    with patch("backend.client.requests.request", return_value=_response(404, {"message": "Document not found"})):
        with pytest.raises(BackendError, match="Document not found"):
            api_delete("collections/loc/documents/missing")


@override_settings(**BACKEND)
def test_http_error_without_message_falls_back_to_status():
    with patch("backend.client.requests.request", return_value=_response(500)):
        with pytest.raises(BackendError, match="GET collections/x failed with HTTP 500"):
            api_get("collections/x")


@override_settings(**BACKEND)
def test_connection_error_is_wrapped():
    with patch("backend.client.requests.request", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(BackendError, match="unreachable"):
            api_get("collections/x")


@override_settings(**{**BACKEND, "BACKEND_API_KEY": ""})
def test_missing_configuration_raises_before_request():
    with patch("backend.client.requests.request") as req:
        with pytest.raises(BackendConfigError):
            api_get("collections/x")
    req.assert_not_called()
