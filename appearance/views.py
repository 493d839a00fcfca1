import logging
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseBadRequest
from django.shortcuts import redirect
from django.urls import reverse
from django.views.decorators.http import require_POST
from .theme import THEME_CHOICES, apply_theme

logger = logging.getLogger(__name__)


@login_required
@require_POST
def set_theme(request):
    choice = request.POST.get("theme")
    if choice not in THEME_CHOICES:
        return HttpResponseBadRequest("theme must be light, dark or system")
    response = redirect(reverse("dashboard:settings"))
    is_dark = apply_theme(response, request, choice)
    logger.debug("Theme set to %s (dark=%s) for user %s", choice, is_dark, request.user.pk)
    return response
