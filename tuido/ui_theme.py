"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (list rows, prompt, help, chrome). Tag colors
are generated per run and the source-context strip uses a Pygments style; both
are separate from the theme.
"""

from __future__ import annotations

from dataclasses import dataclass

from .model import Status


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    status_open: str
    status_ongoing: str
    status_checked: str
    status_obsolete: str
    location: str
    filter_query: str
    filter_hint: str
    empty_hint: str
    help_heading: str
    help_key: str
    help_dim: str
    help_modal_title: str
    help_modal_border: str
    help_backdrop: str
    use_tag_colors: bool = True

    def status_style(self, status: Status) -> str:
        return {
            Status.OPEN: self.status_open,
            Status.ONGOING: self.status_ongoing,
            Status.CHECKED: self.status_checked,
            Status.OBSOLETE: self.status_obsolete,
        }[status]


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    status_open="\033[38;5;252m",
    status_ongoing="\033[1;38;5;214m",
    status_checked="\033[38;5;42m",
    status_obsolete="\033[2;38;5;245m",
    location="\033[2;38;5;250m",
    filter_query="\033[1;38;5;81m",
    filter_hint="\033[2;38;5;250m",
    empty_hint="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    help_modal_title="\033[1;38;5;45m",
    help_modal_border="\033[38;5;45m",
    help_backdrop="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    status_open="\033[38;5;153m",
    status_ongoing="\033[1;38;5;215m",
    status_checked="\033[38;5;84m",
    status_obsolete="\033[2;38;5;110m",
    location="\033[2;38;5;110m",
    filter_query="\033[1;38;5;45m",
    filter_hint="\033[2;38;5;110m",
    empty_hint="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    help_modal_title="\033[1;38;5;39m",
    help_modal_border="\033[38;5;39m",
    help_backdrop="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    status_open="",
    status_ongoing="",
    status_checked="",
    status_obsolete="",
    location="",
    filter_query="",
    filter_hint="",
    empty_hint="",
    help_heading="",
    help_key="",
    help_dim="",
    help_modal_title="",
    help_modal_border="",
    help_backdrop="",
    use_tag_colors=False,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
