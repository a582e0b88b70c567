"""UI theme definitions and selection helpers.

Themes carry two palettes: ANSI escapes for entry names and tree connectors,
and Rich style names for table headers and columns.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing.categories import FileCategory


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by renderers."""

    name: str
    reset: str
    tree_branch: str
    tree_root: str
    name_dir: str
    name_source: str
    name_document: str
    name_data: str
    name_image: str
    name_default: str
    table_header: str
    table_permissions: str
    table_owner: str
    table_name: str
    table_type: str
    table_size: str
    table_modified: str

    def name_color(self, category: FileCategory) -> str:
        """Return the ANSI color for names of ``category``."""
        return {
            FileCategory.DIRECTORY: self.name_dir,
            FileCategory.SOURCE: self.name_source,
            FileCategory.DOCUMENT: self.name_document,
            FileCategory.DATA: self.name_data,
            FileCategory.IMAGE: self.name_image,
        }.get(category, self.name_default)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_branch="\033[2;38;5;245m",
    tree_root="\033[1;34m",
    name_dir="\033[1;94m",
    name_source="\033[38;5;110m",
    name_document="\033[38;5;229m",
    name_data="\033[38;5;180m",
    name_image="\033[38;5;176m",
    name_default="",
    table_header="bright_green",
    table_permissions="bright_yellow",
    table_owner="bright_white",
    table_name="bright_cyan",
    table_type="white",
    table_size="bright_magenta",
    table_modified="bright_blue",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_branch="\033[2;38;5;31m",
    tree_root="\033[1;38;5;45m",
    name_dir="\033[1;38;5;45m",
    name_source="\033[38;5;117m",
    name_document="\033[38;5;153m",
    name_data="\033[38;5;73m",
    name_image="\033[38;5;111m",
    name_default="\033[38;5;252m",
    table_header="bold deep_sky_blue1",
    table_permissions="steel_blue1",
    table_owner="grey85",
    table_name="sky_blue1",
    table_type="grey70",
    table_size="cadet_blue",
    table_modified="dodger_blue2",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_branch="",
    tree_root="",
    name_dir="",
    name_source="",
    name_document="",
    name_data="",
    name_image="",
    name_default="",
    table_header="",
    table_permissions="",
    table_owner="",
    table_name="",
    table_type="",
    table_size="",
    table_modified="",
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
