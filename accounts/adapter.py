from allauth.account.adapter import DefaultAccountAdapter
from django.conf import settings


class AdminAccountAdapter(DefaultAccountAdapter):
    """Administrators are provisioned by staff; self sign-up stays closed."""

    def is_open_for_signup(self, request):
        return getattr(settings, "ACCOUNT_ALLOW_SIGNUP", False)
