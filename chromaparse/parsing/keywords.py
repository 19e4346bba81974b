"""
Static color keyword tables.

Names are stored lowercase; every lookup is case-insensitive. The HTML 4.01
and CSS3 tables come from ``webcolors``; see
https://webcolors.readthedocs.io/en/latest/colors.html for which standard
defines which names.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import webcolors


def _named_colors(spec: str) -> Dict[str, str]:
    return {name: webcolors.name_to_hex(name, spec=spec) for name in webcolors.names(spec)}


# HTML 4.01 / CSS1 keywords, https://www.w3.org/TR/html401/types.html#h-6.5
BASIC_COLORS: Mapping[str, str] = MappingProxyType(_named_colors(webcolors.HTML4))

# CSS3 extended keywords plus CSS4's rebeccapurple
EXTENDED_COLORS: Mapping[str, str] = MappingProxyType({
    **_named_colors(webcolors.CSS3),
    "rebeccapurple": "#663399",
})

# CSS2 system colors: platform dependent, no defined RGB value
SYSTEM_COLORS = frozenset(name.lower() for name in (
    "ActiveBorder",
    "ActiveCaption",
    "AppWorkspace",
    "Background",
    "ButtonFace",
    "ButtonHighlight",
    "ButtonShadow",
    "ButtonText",
    "CaptionText",
    "GrayText",
    "Highlight",
    "HighlightText",
    "InactiveBorder",
    "InactiveCaption",
    "InactiveCaptionText",
    "InfoBackground",
    "InfoText",
    "Menu",
    "MenuText",
    "Scrollbar",
    "ThreeDDarkShadow",
    "ThreeDFace",
    "ThreeDHighlight",
    "ThreeDLightShadow",
    "ThreeDShadow",
    "Window",
    "WindowFrame",
    "WindowText",
))


def lookup_keyword(name: str, table: Mapping[str, str] = EXTENDED_COLORS) -> Optional[str]:
    """Return the ``#rrggbb`` value of ``name`` in ``table``, or None."""
    return table.get(name.lower())


def is_system_color(name: str) -> bool:
    return name.lower() in SYSTEM_COLORS
