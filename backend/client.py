import logging
import requests
from django.conf import settings


logger = logging.getLogger(__name__)


class BackendError(Exception):
    pass


class BackendConfigError(BackendError):
    pass


def _base_url():
    if not settings.BACKEND_ENDPOINT or not settings.BACKEND_PROJECT_ID or not settings.BACKEND_API_KEY:
        logger.error("Backend not fully configured (endpoint/project/key)")
        raise BackendConfigError("Backend service is not configured")
    return f"{settings.BACKEND_ENDPOINT.rstrip('/')}/databases/{settings.BACKEND_DATABASE_ID}"


def _headers(json_body: bool = False):
    h = {
        "X-Appwrite-Project": settings.BACKEND_PROJECT_ID,
        "X-Appwrite-Key": settings.BACKEND_API_KEY,
        "Accept": "application/json",
    }
    if json_body:
        h["Content-Type"] = "application/json"
    return h


def _error_message(method, path, response):
    if response is None:
        return f"{method} {path} failed"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return f"{method} {path} failed with HTTP {response.status_code}"


def _request(method, path, **kwargs):
    url = f"{_base_url()}/{path.lstrip('/')}"
    try:
        r = requests.request(
            method,
            url,
            timeout=settings.BACKEND_TIMEOUT_SECONDS,
            **kwargs,
        )
        r.raise_for_status()
    except requests.HTTPError as e:
        body = e.response.text if e.response is not None else ""
        status = e.response.status_code if e.response is not None else ""
        logger.error("Backend %s %s failed: %s %s", method, url, status, body[:500])
        raise BackendError(_error_message(method, path, e.response)) from e
    except requests.RequestException as e:
        logger.error("Backend %s %s unreachable: %s", method, url, str(e))
        raise BackendError(f"Backend service unreachable: {e}") from e
    return r


def _json(method, path, response):
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        logger.error("Backend %s %s returned non-JSON body: %s", method, path, response.text[:500])
        raise BackendError(f"{method} {path} returned an invalid response") from e


def api_get(path, params=None):
    r = _request("GET", path, headers=_headers(), params=params)
    return _json("GET", path, r)


def api_post(path, payload: dict):
    r = _request("POST", path, headers=_headers(json_body=True), json=payload)
    return _json("POST", path, r)


def api_patch(path, payload: dict):
    r = _request("PATCH", path, headers=_headers(json_body=True), json=payload)
    return _json("PATCH", path, r)


def api_delete(path):
    _request("DELETE", path, headers=_headers())
    return None
