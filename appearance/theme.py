THEME_COOKIE = "theme"
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365
THEME_CHOICES = ("light", "dark", "system")
THEME_OPTIONS = [("light", "Light"), ("dark", "Dark"), ("system", "System")]
COLOR_SCHEME_HINT = "Sec-CH-Prefers-Color-Scheme"


def stored_theme(request):
    """Explicit choice from the cookie, or None when following the system."""
    value = request.COOKIES.get(THEME_COOKIE)
    return value if value in ("light", "dark") else None


def system_prefers_dark(request) -> bool:
    hint = request.headers.get(COLOR_SCHEME_HINT, "")
    return hint.strip().strip('"').lower() == "dark"


def resolve_theme(request):
    """Return (choice, is_dark) for the current request."""
    choice = stored_theme(request)
    if choice is None:
        return "system", system_prefers_dark(request)
    return choice, choice == "dark"


def apply_theme(response, request, choice):
    """Persist choice on response and return whether dark mode now applies."""
    if choice == "system":
        response.delete_cookie(THEME_COOKIE, samesite="Lax")
        return system_prefers_dark(request)
    response.set_cookie(
        THEME_COOKIE,
        choice,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="Lax",
    )
    return choice == "dark"
