"""Embed code generation and embed query-string handling."""
from __future__ import annotations

import html
import logging
from typing import Mapping
from urllib.parse import quote

from core.presets import CALCULATORS
from core.theme import EmbedTheme, encode_theme_to_param, merge_theme

logger = logging.getLogger(__name__)

CALCULATOR_KEYS = tuple(CALCULATORS)
DEFAULT_CALCULATOR = "purchase"

IFRAME_STYLE = "border:0;width:100%;max-width:980px;height:820px;"


def _first(value):
    # st.query_params yields strings; older APIs yield lists of strings.
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def calculator_from_query(params: Mapping) -> str:
    """Calculator requested by the ``calculator`` query parameter."""
    raw = _first(params.get("calculator")) or DEFAULT_CALCULATOR
    return raw if raw in CALCULATOR_KEYS else DEFAULT_CALCULATOR


def theme_param_from_query(params: Mapping):
    return _first(params.get("t"))


def is_embed_request(params: Mapping) -> bool:
    return "embed" in params


def build_embed_url(origin: str, calculator: str, theme: EmbedTheme) -> str:
    if calculator not in CALCULATOR_KEYS:
        raise ValueError(f"Unknown calculator: {calculator!r}")
    t = encode_theme_to_param(merge_theme(theme))
    base = origin.rstrip("/")
    return f"{base}/?embed=1&calculator={quote(calculator, safe='')}&t={quote(t, safe='')}"


def build_embed_code(origin: str, calculator: str, theme: EmbedTheme) -> str:
    """Return iframe markup that embeds ``calculator`` styled with ``theme``."""
    src = html.escape(build_embed_url(origin, calculator, theme), quote=True)
    logger.info("Generated embed code for %s", calculator)
    return (
        f'<iframe src="{src}" style="{IFRAME_STYLE}" loading="lazy" '
        'referrerpolicy="no-referrer-when-downgrade"></iframe>'
    )
