"""
Theme Applier

Turns a theme settings record into the style variables the marketing site
renders with. The result is an immutable ``ThemeContext`` handed to the
rendering boundary; nothing is written to shared state.

Blank or missing fields fall back to ``THEME_DEFAULTS``, and so do values
that could break out of a style declaration (fonts and weights outside
``FONT_NAME_PATTERN``/``FONT_WEIGHT_PATTERN``, colors that are not hex).
Colors are normalized to ``#rrggbb``. One value is
derived: ``--section-text-color`` contrasts with the section background.

Usage:
    context = apply_theme(ThemeSettings.get_active())
    context.variables["--primary-color"]
    context.as_css()
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional, Tuple

from shared.domain.value_objects import HexColor

logger = logging.getLogger(__name__)

BLACK = "#000000"
WHITE = "#ffffff"
DEFAULT_FONT = "Inter"
LIGHTNESS_THRESHOLD = 0.5
FONT_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9 \-]*$"
FONT_WEIGHT_PATTERN = r"^[1-9]00$"
GOOGLE_FONTS_URL = (
    "https://fonts.googleapis.com/css2?family={family}:wght@300;400;500;600;700&display=swap"
)

THEME_DEFAULTS = MappingProxyType({
    "primary_color": "#1e3a5f",
    "secondary_color": "#f5f1ea",
    "tertiary_color": "#ffffff",
    "text_color": "#1a1a1a",
    "link_color": "#1e3a5f",
    "link_hover_color": "#0f2440",
    "navigation_color": "#1a1a1a",
    "sub_navigation_color": "#2a2a2a",
    "header_background_color": "#ffffff",
    "section_background_color": "#f8f8f8",
    "heading_font": DEFAULT_FONT,
    "body_font": DEFAULT_FONT,
    "button_font": DEFAULT_FONT,
    "heading_font_weight": "600",
    "body_font_weight": "400",
    "button_font_weight": "500",
    "header_logo": "primary",
})

# settings field -> style variable
VARIABLE_NAMES = (
    ("primary_color", "--primary-color"),
    ("secondary_color", "--secondary-color"),
    ("tertiary_color", "--tertiary-color"),
    ("text_color", "--text-color"),
    ("link_color", "--link-color"),
    ("link_hover_color", "--link-hover-color"),
    ("navigation_color", "--navigation-color"),
    ("sub_navigation_color", "--sub-navigation-color"),
    ("header_background_color", "--header-background-color"),
    ("section_background_color", "--section-background-color"),
    ("heading_font", "--heading-font"),
    ("body_font", "--body-font"),
    ("button_font", "--button-font"),
    ("heading_font_weight", "--heading-font-weight"),
    ("body_font_weight", "--body-font-weight"),
    ("button_font_weight", "--button-font-weight"),
)
FONT_FIELDS = ("heading_font", "body_font", "button_font")
WEIGHT_FIELDS = ("heading_font_weight", "body_font_weight", "button_font_weight")
COLOR_FIELDS = tuple(name for name in THEME_DEFAULTS if name.endswith("_color"))


def relative_luminance(color: str) -> Optional[float]:
    """Relative luminance of ``color``, or None when it is not a hex color."""
    parsed = HexColor.parse(color)
    return parsed.relative_luminance if parsed else None


def is_color_light(color: str) -> bool:
    """Unparseable colors count as light."""
    parsed = HexColor.parse(color)
    return parsed.is_light(LIGHTNESS_THRESHOLD) if parsed else True


def contrasting_text_color(background: str) -> str:
    return BLACK if is_color_light(background) else WHITE


def font_stylesheet_url(family: str) -> str:
    return GOOGLE_FONTS_URL.format(family="+".join(family.split()))


@dataclass(frozen=True)
class ThemeContext:
    variables: Mapping = field(default_factory=lambda: MappingProxyType({}))
    logo_url: Optional[str] = None
    font_stylesheets: Tuple[str, ...] = ()

    def as_css(self, selector: str = ":root") -> str:
        body = "\n".join(f"  {name}: {value};" for name, value in self.variables.items())
        return f"{selector} {{\n{body}\n}}"

    def as_dict(self) -> dict:
        return {
            "variables": dict(self.variables),
            "logo_url": self.logo_url,
            "font_stylesheets": list(self.font_stylesheets),
        }


def _raw_value(settings: Any, name: str) -> Any:
    if settings is None:
        return None
    if isinstance(settings, Mapping):
        return settings.get(name)
    return getattr(settings, name, None)


def _clean_value(name: str, value: str) -> Optional[str]:
    """``value`` made safe for a style declaration, or None to use the default."""
    if name in FONT_FIELDS:
        return value if re.fullmatch(FONT_NAME_PATTERN, value) else None
    if name in WEIGHT_FIELDS:
        return value if re.fullmatch(FONT_WEIGHT_PATTERN, value) else None
    if name in COLOR_FIELDS:
        parsed = HexColor.parse(value)
        return parsed.value if parsed else None
    return value


def resolve_settings(settings: Any) -> dict:
    """Every theme field with blank or unsafe values replaced by defaults."""
    resolved = {}
    for name, default in THEME_DEFAULTS.items():
        value = _raw_value(settings, name)
        value = str(value).strip() if value is not None else ""
        if not value:
            resolved[name] = default
            continue
        cleaned = _clean_value(name, value)
        if cleaned is None:
            logger.warning(f"Ignoring theme value {value!r} for {name}, using default")
            cleaned = default
        resolved[name] = cleaned
    return resolved


def apply_theme(settings: Any = None) -> ThemeContext:
    """
    Build the ``ThemeContext`` for ``settings``

    ``settings`` may be a ``ThemeSettings`` instance, a mapping with the same
    field names, or None (all defaults).
    """
    resolved = resolve_settings(settings)

    variables = {variable: resolved[name] for name, variable in VARIABLE_NAMES}
    variables["--section-text-color"] = contrasting_text_color(resolved["section_background_color"])

    logo_url = None
    if resolved["header_logo"] in ("primary", "secondary"):
        logo_url = _raw_value(settings, f"{resolved['header_logo']}_logo") or None

    stylesheets = []
    for name in FONT_FIELDS:
        family = resolved[name]
        url = font_stylesheet_url(family)
        if family != DEFAULT_FONT and url not in stylesheets:
            stylesheets.append(url)

    return ThemeContext(
        variables=MappingProxyType(variables),
        logo_url=logo_url,
        font_stylesheets=tuple(stylesheets),
    )
