from .theme import THEME_OPTIONS, resolve_theme


def theme(request):
    choice, is_dark = resolve_theme(request)
    return {"theme_choice": choice, "dark_mode": is_dark, "theme_options": THEME_OPTIONS}
