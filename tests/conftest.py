import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
django.setup()

import pytest  # noqa: E402
from django.contrib.messages.storage.fallback import FallbackStorage  # noqa: E402
from django.contrib.sessions.middleware import SessionMiddleware  # noqa: E402
from django.test import RequestFactory  # noqa: E402

from accounts.models import User  # noqa: E402


@pytest.fixture
def admin_user():
    # unsaved instance; views only need is_authenticated and name
    return User(email="ada@example.com", name="Ada")


@pytest.fixture
def make_request(admin_user):
    factory = RequestFactory()

    def _make(method="get", path="/", data=None, user=None, cookies=None, session=None, **extra):
        request = getattr(factory, method)(path, data or {}, **extra)
        SessionMiddleware(lambda r: None).process_request(request)
        for key, value in (session or {}).items():
            request.session[key] = value
        request._messages = FallbackStorage(request)
        request.user = user or admin_user
        request.COOKIES.update(cookies or {})
        return request

    return _make
