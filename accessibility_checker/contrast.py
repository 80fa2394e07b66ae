"""
WCAG 2.x colour contrast helpers for inline styles.

Only colours declared in ``style`` attributes are considered; stylesheets and
computed styles are out of reach without a rendering engine.
"""

import re
from typing import Dict, Optional, Tuple

from bs4.element import Tag

RGB = Tuple[int, int, int]

NORMAL_TEXT_RATIO = 4.5
LARGE_TEXT_RATIO = 3.0

# CSS px thresholds for "large text": 18pt, or 14pt bold.
LARGE_TEXT_PX = 24.0
LARGE_BOLD_TEXT_PX = 18.66

# Headings whose user-agent default size and weight already count as large.
LARGE_BY_DEFAULT = ("h1", "h2", "h3")
BOLD_BY_DEFAULT = ("b", "strong", "th", "h1", "h2", "h3", "h4", "h5", "h6")

NAMED_COLORS: Dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
    "navy": (0, 0, 128),
    "yellow": (255, 255, 0),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "maroon": (128, 0, 0),
    "olive": (128, 128, 0),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
    "cyan": (0, 255, 255),
    "fuchsia": (255, 0, 255),
    "magenta": (255, 0, 255),
    "silver": (192, 192, 192),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "darkgray": (169, 169, 169),
    "darkgrey": (169, 169, 169),
    "whitesmoke": (245, 245, 245),
}

INHERITED_KEYWORDS = ("transparent", "inherit", "unset", "revert", "none")

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$")
_SIZE_RE = re.compile(r"^([\d.]+)\s*(px|pt)$")


def parse_color(value: str) -> Optional[RGB]:
    """Parse a CSS colour into an RGB triple. Returns None for anything
    translucent or unrecognised."""
    value = (value or "").strip().lower()
    if not value:
        return None
    if value in NAMED_COLORS:
        return NAMED_COLORS[value]
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1)
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 8:
            if digits[6:] != "ff":
                return None
            digits = digits[:6]
        return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
    m = _RGB_RE.match(value)
    if m:
        parts = [p.strip() for p in re.split(r"[,\s/]+", m.group(1)) if p.strip()]
        if len(parts) not in (3, 4):
            return None
        if len(parts) == 4:
            alpha = parts[3]
            try:
                a = float(alpha[:-1]) / 100 if alpha.endswith("%") else float(alpha)
            except ValueError:
                return None
            if a < 1:
                return None
        channels = []
        for p in parts[:3]:
            try:
                if p.endswith("%"):
                    channels.append(round(float(p[:-1]) * 255 / 100))
                else:
                    channels.append(round(float(p)))
            except ValueError:
                return None
        return tuple(max(0, min(255, c)) for c in channels)
    return None


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an sRGB colour."""
    def channel(c: int) -> float:
        s = c / 255
        return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(fg: RGB, bg: RGB) -> float:
    l1, l2 = relative_luminance(fg), relative_luminance(bg)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def parse_style(style: Optional[str]) -> Dict[str, str]:
    """Inline style attribute -> {property: value}, property names lowercased."""
    declarations: Dict[str, str] = {}
    for decl in (style or "").split(";"):
        if ":" not in decl:
            continue
        prop, _, value = decl.partition(":")
        value = value.replace("!important", "").strip()
        if prop.strip() and value:
            declarations[prop.strip().lower()] = value
    return declarations


def _background_of(decls: Dict[str, str]) -> Optional[str]:
    if "background-color" in decls:
        return decls["background-color"]
    background = decls.get("background")
    if not background:
        return None
    # The shorthand may mix an image, position and colour; take the first colour token.
    for token in re.findall(r"rgba?\([^)]*\)|#[0-9a-fA-F]+|[a-zA-Z]+", background):
        if parse_color(token) is not None:
            return token
    return None


def _font_size_px(value: str) -> Optional[float]:
    m = _SIZE_RE.match(value.strip().lower())
    if not m:
        return None
    size = float(m.group(1))
    return size * 4 / 3 if m.group(2) == "pt" else size


def _is_bold(value: str) -> bool:
    value = value.strip().lower()
    if value in ("bold", "bolder"):
        return True
    return value.isdigit() and int(value) >= 700


def _is_see_through(value: str) -> bool:
    """True for values that leave the parent's colour showing unchanged."""
    value = value.strip().lower()
    if value in INHERITED_KEYWORDS:
        return True
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1)
        return (len(digits) == 4 and digits[3] == "0") or (len(digits) == 8 and digits[6:] == "00")
    m = _RGB_RE.match(value)
    if m:
        parts = [p.strip() for p in re.split(r"[,\s/]+", m.group(1)) if p.strip()]
        if len(parts) == 4:
            alpha = parts[3].rstrip("%")
            try:
                return float(alpha) == 0
            except ValueError:
                return False
    return False


def resolve_colors(tag: Tag) -> Tuple[Optional[str], Optional[str]]:
    """Nearest inline foreground and background colour declarations for a tag,
    looking at the tag itself and then its ancestors.

    Fully transparent backgrounds and inherit-style keywords are passed over.
    """
    fg: Optional[str] = None
    bg: Optional[str] = None
    node: Optional[Tag] = tag
    while isinstance(node, Tag) and (fg is None or bg is None):
        decls = parse_style(node.get("style"))
        if fg is None and "color" in decls and not _is_see_through(decls["color"]):
            fg = decls["color"]
        if bg is None:
            value = _background_of(decls)
            if value is not None and not _is_see_through(value):
                bg = value
        node = node.parent
    return fg, bg


def is_large_text(tag: Tag) -> bool:
    size: Optional[float] = None
    bold: Optional[bool] = None
    node: Optional[Tag] = tag
    while isinstance(node, Tag) and (size is None or bold is None):
        decls = parse_style(node.get("style"))
        if size is None and "font-size" in decls:
            size = _font_size_px(decls["font-size"])
        if bold is None and "font-weight" in decls:
            bold = _is_bold(decls["font-weight"])
        node = node.parent
    if bold is None:
        bold = tag.name in BOLD_BY_DEFAULT
    if size is None:
        return tag.name in LARGE_BY_DEFAULT
    return size >= LARGE_TEXT_PX or (bold and size >= LARGE_BOLD_TEXT_PX)


def required_ratio(tag: Tag) -> float:
    return LARGE_TEXT_RATIO if is_large_text(tag) else NORMAL_TEXT_RATIO
