import logging
from django.conf import settings
from .client import BackendError, api_get, api_post, api_patch, api_delete

logger = logging.getLogger(__name__)


def _documents_path(collection_id: str, document_id: str = ""):
    path = f"collections/{collection_id}/documents"
    if document_id:
        path = f"{path}/{document_id}"
    return path


def _list_params():
    return {"queries[]": [f"limit({int(settings.BACKEND_PAGE_LIMIT)})"]}


def list_documents(collection_id: str):
    res = api_get(_documents_path(collection_id), params=_list_params()) or {}
    if not isinstance(res, dict) or not isinstance(res.get("documents") or [], list):
        logger.error("Unexpected list response from %s: %r", collection_id, res)
        raise BackendError(f"Listing {collection_id} returned an unexpected response")
    documents = res.get("documents") or []
    logger.debug("Fetched %d documents from %s", len(documents), collection_id)
    return {"documents": documents, "total": res.get("total", len(documents))}


def fetch_locations():
    return list_documents(settings.BACKEND_LOCATIONS_COLLECTION_ID)["documents"]


def add_location(data: dict):
    return api_post(
        _documents_path(settings.BACKEND_LOCATIONS_COLLECTION_ID),
        {"documentId": "unique()", "data": data},
    )


def update_location(location_id: str, data: dict):
    return api_patch(
        _documents_path(settings.BACKEND_LOCATIONS_COLLECTION_ID, location_id),
        {"data": data},
    )


def delete_location(location_id: str):
    api_delete(_documents_path(settings.BACKEND_LOCATIONS_COLLECTION_ID, location_id))


def get_students():
    return list_documents(settings.BACKEND_STUDENTS_COLLECTION_ID)


def fetch_courses():
    return list_documents(settings.BACKEND_COURSES_COLLECTION_ID)["documents"]


def get_attendance():
    return list_documents(settings.BACKEND_ATTENDANCE_COLLECTION_ID)["documents"]
