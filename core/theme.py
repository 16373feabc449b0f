"""Embed theme configuration.

A theme travels inside the embed URL as base64url-encoded JSON.  Decoding is
forgiving: anything malformed falls back to :data:`DEFAULT_THEME` and any
blank or non-string color falls back to that field's default.
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
import math
import re
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")
# characters that could end a CSS declaration or the surrounding <style> tag
_UNSAFE_RE = re.compile(r"[;{}<>\"'\\\r\n]")


def is_safe_color(value) -> bool:
    """True for a non-blank string that can sit inside a CSS declaration."""
    return isinstance(value, str) and bool(value.strip()) and not _UNSAFE_RE.search(value)


class _ThemeModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("*")
    @classmethod
    def _reject_unsafe(cls, v):
        if isinstance(v, str) and not is_safe_color(v):
            raise ValueError("color contains characters not allowed in CSS values")
        return v


class ChartPalette(_ThemeModel):
    primary_from: str = "#00f2fe"
    primary_to: str = "#4facfe"
    secondary_from: str = "#fe8c00"
    secondary_to: str = "#f83600"
    accent_from: str = "#22d3ee"
    accent_to: str = "#22c55e"
    neutral_from: str = "#e2e8f0"
    neutral_to: str = "#94a3b8"


class EmbedTheme(_ThemeModel):
    bg: str = "#ffffff"
    surface: str = "#ffffff"
    surface_muted: str = "#f8fafc"
    border: str = "#e2e8f0"
    text: str = "#0f172a"
    muted: str = "#64748b"
    primary: str = "#1e1b4b"
    primary_contrast: str = "#ffffff"
    input_bg: str = "#ffffff"
    input_border: str = "#e2e8f0"
    ring: str = "rgba(30, 27, 75, 0.10)"
    chart: ChartPalette = ChartPalette()


DEFAULT_THEME = EmbedTheme()


def _coerce_colors(model_cls, raw: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, str]:
    """Pick known color fields out of ``raw`` (camelCase or snake_case)."""
    names = {to_camel(name): name for name in model_cls.model_fields}
    out: Dict[str, str] = {}
    for key, value in raw.items():
        name = names.get(key, key)
        if name == "chart" or name not in defaults:
            continue
        if is_safe_color(value):
            out[name] = value
        else:
            if isinstance(value, str) and value.strip():
                logger.warning("Ignoring unsafe embed theme color for %s: %r", name, value)
            out[name] = defaults[name]
    return out


def merge_theme(partial: Union[EmbedTheme, Dict[str, Any], None] = None) -> EmbedTheme:
    """Overlay ``partial`` on the default theme; the chart palette merges too."""
    if partial is None:
        return DEFAULT_THEME
    if isinstance(partial, EmbedTheme):
        return partial
    base = DEFAULT_THEME.model_dump()
    fields = _coerce_colors(EmbedTheme, partial, base)
    chart = dict(base["chart"])
    raw_chart = partial.get("chart")
    if isinstance(raw_chart, ChartPalette):
        chart = raw_chart.model_dump()
    elif isinstance(raw_chart, dict):
        chart.update(_coerce_colors(ChartPalette, raw_chart, chart))
    return EmbedTheme(**{**base, **fields, "chart": ChartPalette(**chart)})


def encode_theme_to_param(theme: EmbedTheme) -> str:
    """Serialize ``theme`` to an unpadded base64url string."""
    payload = json.dumps(theme.model_dump(by_alias=True), separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def decode_theme_from_param(param: Optional[str]) -> EmbedTheme:
    """Parse a theme query parameter, falling back to the default theme."""
    if not param:
        return DEFAULT_THEME
    padded = param + "=" * (-len(param) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
        parsed = json.loads(decoded)
    except (binascii.Error, ValueError) as exc:
        logger.warning("Ignoring malformed embed theme: %s", exc)
        return DEFAULT_THEME
    if not isinstance(parsed, dict):
        logger.warning("Ignoring embed theme that is not an object: %r", type(parsed).__name__)
        return DEFAULT_THEME
    try:
        return merge_theme(parsed)
    except ValidationError as exc:
        logger.warning("Embed theme failed validation: %s", exc)
        return DEFAULT_THEME


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Convert ``#rgb`` or ``#rrggbb`` to an ``rgba()`` string."""
    cleaned = str(hex_color).strip().lstrip("#")
    if len(cleaned) == 3:
        cleaned = "".join(c + c for c in cleaned)
    try:
        a = float(alpha)
    except (TypeError, ValueError):
        a = math.nan
    if not _HEX_RE.match(cleaned):
        return f"rgba(0,0,0,{_fmt_alpha(alpha)})"
    a = min(1.0, max(0.0, a)) if math.isfinite(a) else 0.0
    r, g, b = (int(cleaned[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r},{g},{b},{_fmt_alpha(a)})"


def _fmt_alpha(a) -> str:
    # 0.5 -> "0.5", 1.0 -> "1"
    try:
        return f"{float(a):g}"
    except (TypeError, ValueError):
        return str(a)


def theme_css_variables(theme: EmbedTheme) -> Dict[str, str]:
    """Map a theme onto the ``--mc-*`` CSS custom properties."""
    out = {
        f"--mc-{name.replace('_', '-')}": value
        for name, value in theme.model_dump(exclude={"chart"}).items()
    }
    for name, value in theme.chart.model_dump().items():
        out[f"--mc-chart-{name.replace('_', '-')}"] = value
    return out


def theme_style_block(theme: EmbedTheme) -> str:
    """``<style>`` markup that applies ``theme`` to the Streamlit page."""
    decls = ";".join(f"{k}:{v}" for k, v in theme_css_variables(theme).items())
    return (
        "<style>"
        f":root{{{decls}}}"
        '[data-testid="stAppViewContainer"]{background-color:var(--mc-bg);color:var(--mc-text);}'
        '[data-testid="stMetricValue"]{color:var(--mc-primary);}'
        "</style>"
    )
