"""
color_math.py — Hex / RGB / HSL arithmetic for palette derivation.

Plain web-safe sRGB maths, no colour management:
  normalize_hex('abc')            → '#AABBCC'
  shift_hue('#FF0000', 180)       → '#00FFFF'
  mix('#000000', '#FFFFFF', 0.5)  → '#808080'
  readable_text_color('#1D4ED8')  → '#FFFFFF'
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

NEAR_BLACK = "#111827"
WHITE = "#FFFFFF"

# Brightness above which dark text reads better than white
READABLE_TEXT_THRESHOLD = 0.62

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def clamp(n: float, lo: float, hi: float) -> float:
    return min(max(n, lo), hi)


def _round(n: float) -> int:
    # half-up, so 127.5 → 128 regardless of parity
    return int(math.floor(n + 0.5))


# ── Hex ↔ RGB ────────────────────────────────────────────────────────────────

def normalize_hex(value: Optional[str]) -> Optional[str]:
    """
    Normalise '#abc', 'abc', '#AABBCC' or 'aabbcc' to '#AABBCC'.

    Returns None when the string is not a 3- or 6-digit hex colour;
    callers fall back to their own default.
    """
    s = str(value or "").strip()
    m = _HEX_RE.match(s)
    if not m:
        return None
    raw = m.group(1).upper()
    if len(raw) == 3:
        raw = "".join(c * 2 for c in raw)
    return f"#{raw}"


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    h = hex_str.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    def _to(n: float) -> str:
        return f"{int(clamp(_round(n), 0, 255)):02X}"
    return f"#{_to(r)}{_to(g)}{_to(b)}"


# ── RGB ↔ HSL ────────────────────────────────────────────────────────────────

def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """RGB (0–255) → HSL (H: 0–360, S: 0–1, L: 0–1)"""
    rr, gg, bb = r / 255, g / 255, b / 255
    mx, mn = max(rr, gg, bb), min(rr, gg, bb)
    delta = mx - mn
    L = (mx + mn) / 2
    S = 0.0 if delta == 0 else delta / (1 - abs(2 * L - 1))
    if delta == 0:
        H = 0.0
    elif mx == rr:
        H = 60 * (((gg - bb) / delta) % 6)
    elif mx == gg:
        H = 60 * (((bb - rr) / delta) + 2)
    else:
        H = 60 * (((rr - gg) / delta) + 4)
    return H % 360, S, L


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """HSL (H: degrees, S: 0–1, L: 0–1) → rounded RGB (0–255)"""
    H = h % 360
    C = (1 - abs(2 * l - 1)) * s
    X = C * (1 - abs((H / 60) % 2 - 1))
    m = l - C / 2
    if   H < 60:  r, g, b = C, X, 0.0
    elif H < 120: r, g, b = X, C, 0.0
    elif H < 180: r, g, b = 0.0, C, X
    elif H < 240: r, g, b = 0.0, X, C
    elif H < 300: r, g, b = X, 0.0, C
    else:         r, g, b = C, 0.0, X
    return _round((r + m) * 255), _round((g + m) * 255), _round((b + m) * 255)


# ── Derived operations ───────────────────────────────────────────────────────

def shift_hue(hex_str: str, degrees: float) -> str:
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_str))
    return rgb_to_hex(*hsl_to_rgb((h + degrees) % 360, s, l))


def mix(hex_a: str, hex_b: str, t: float) -> str:
    """Linear per-channel blend: t=0 → hex_a, t=1 → hex_b."""
    a = hex_to_rgb(hex_a)
    b = hex_to_rgb(hex_b)
    tt = clamp(t, 0.0, 1.0)
    return rgb_to_hex(*(ca + (cb - ca) * tt for ca, cb in zip(a, b)))


def luminance(hex_str: str) -> float:
    # fast approximation, not the WCAG relative-luminance formula
    r, g, b = hex_to_rgb(hex_str)
    return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255


def readable_text_color(bg_hex: str) -> str:
    return NEAR_BLACK if luminance(bg_hex) > READABLE_TEXT_THRESHOLD else WHITE


def escape_xml(text: str) -> str:
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
