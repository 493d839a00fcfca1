from unittest.mock import patch

import pytest
from django.test import override_settings

from backend import services
from backend.client import BackendError

COLLECTIONS = dict(
    BACKEND_LOCATIONS_COLLECTION_ID="locations",
    BACKEND_STUDENTS_COLLECTION_ID="students",
    BACKEND_COURSES_COLLECTION_ID="courses",
    BACKEND_ATTENDANCE_COLLECTION_ID="attendance",
    BACKEND_PAGE_LIMIT=250,
)


@override_settings(**COLLECTIONS)
def test_fetch_locations_returns_documents():
    docs = [{"$id": "a", "Latitude": 1.0, "Longitude": 2.0}]
    with patch("backend.services.api_get", return_value={"total": 1, "documents": docs}) as get:
        assert services.fetch_locations() == docs
    get.assert_called_once_with(
        "collections/locations/documents", params={"queries[]": ["limit(250)"]}
    )


@override_settings(**COLLECTIONS)
def test_list_without_documents_is_empty():
    with patch("backend.services.api_get", return_value={}):
        assert services.fetch_courses() == []
        assert services.get_attendance() == []
        assert services.get_students() == {"documents": [], "total": 0}


@override_settings(**COLLECTIONS)
def test_get_students_keeps_documents_envelope():
    with patch("backend.services.api_get", return_value={"total": 2, "documents": [{"$id": "s1"}, {"$id": "s2"}]}):
        res = services.get_students()
    assert res["total"] == 2
    assert [s["$id"] for s in res["documents"]] == ["s1", "s2"]


@override_settings(**COLLECTIONS)
def test_location_mutations_hit_document_paths():
    data = {"Latitude": 12.34, "Longitude": 56.78}
    with patch("backend.services.api_post", return_value={"$id": "n1", **data}) as post:
        assert services.add_location(data)["$id"] == "n1"
    post.assert_called_once_with(
        "collections/locations/documents", {"documentId": "unique()", "data": data}
    )
    with patch("backend.services.api_patch", return_value={"$id": "n1", **data}) as patch_:
        services.update_location("n1", data)
    patch_.assert_called_once_with("collections/locations/documents/n1", {"data": data})
    with patch("backend.services.api_delete") as delete:
        assert services.delete_location("n1") is None
    delete.assert_called_once_with("collections/locations/documents/n1")


@override_settings(**COLLECTIONS)
def test_non_object_list_response_is_a_backend_error():
    with patch("backend.services.api_get", return_value=[{"$id": "x"}]):
        with pytest.raises(BackendError, match="unexpected response"):
            services.fetch_locations()
    with patch("backend.services.api_get", return_value={"documents": "nope"}):
        with pytest.raises(BackendError, match="unexpected response"):
            services.get_students()
