from django.test import override_settings

from accounts.adapter import AdminAccountAdapter
from accounts.models import User


def test_signup_closed_by_default(make_request):
    assert AdminAccountAdapter().is_open_for_signup(make_request()) is False


@override_settings(ACCOUNT_ALLOW_SIGNUP=True)
def test_signup_can_be_opened(make_request):
    assert AdminAccountAdapter().is_open_for_signup(make_request()) is True


def test_user_str_prefers_name():
    assert str(User(email="ada@example.com", name="Ada")) == "Ada"
    assert str(User(email="ada@example.com")) == "ada@example.com"
