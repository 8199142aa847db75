"""
Theme
Colour/style strings handed to the render functions. Values are prompt_toolkit
inline style strings, so no global Style object is needed.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    focused: str = "fg:#ff5faf"
    blurred: str = "fg:#585858"
    success: str = "fg:#00d787"
    error: str = "fg:#ff0000"
    title: str = "fg:#875fff bold"
    cursor: str = "reverse"


DEFAULT_THEME = Theme()

# For terminals where dim grey is unreadable
HIGH_CONTRAST_THEME = Theme(
    focused="fg:ansibrightmagenta bold",
    blurred="fg:ansiwhite",
    success="fg:ansibrightgreen",
    error="fg:ansibrightred bold",
    title="fg:ansibrightcyan bold",
)

THEMES = {
    "default": DEFAULT_THEME,
    "high-contrast": HIGH_CONTRAST_THEME,
}


def get_theme(name: str) -> Theme:
    """Theme by name; unknown names fall back to the default."""
    return THEMES.get((name or "").lower(), DEFAULT_THEME)
