from django.utils.cache import patch_vary_headers
from .theme import COLOR_SCHEME_HINT


class ThemeMiddleware:
    """Ask browsers for their color-scheme hint on rendered pages."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        if response.get("Content-Type", "").startswith("text/html"):
            response["Accept-CH"] = COLOR_SCHEME_HINT
            response["Critical-CH"] = COLOR_SCHEME_HINT
            patch_vary_headers(response, (COLOR_SCHEME_HINT, "Cookie"))
        return response
