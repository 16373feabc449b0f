import streamlit as st

from core.embed import build_embed_code
from core.presets import CALCULATORS
from core.theme import DEFAULT_THEME, EmbedTheme, hex_to_rgba, merge_theme

# Theme fields editable from the builder; ``ring`` is rgba() and stays default.
COLOR_FIELDS = {
    "bg": "Page background",
    "surface": "Surface",
    "surface_muted": "Muted surface",
    "border": "Border",
    "text": "Text",
    "muted": "Muted text",
    "primary": "Primary",
    "primary_contrast": "Primary contrast",
}
CHART_FIELDS = {
    "primary_from": "Chart primary (from)",
    "primary_to": "Chart primary (to)",
    "secondary_from": "Chart secondary (from)",
    "secondary_to": "Chart secondary (to)",
}


def _swatches(theme: EmbedTheme) -> str:
    c = theme.chart
    stops = [(c.primary_from, c.primary_to), (c.secondary_from, c.secondary_to), (c.accent_from, c.accent_to)]
    spans = "".join(
        f'<span style="display:inline-block;width:64px;height:18px;margin-right:8px;border-radius:9px;'
        f'background-image:linear-gradient(135deg,{a} 0%,{b} 100%);box-shadow:0 0 14px {hex_to_rgba(b, 0.28)};"></span>'
        for a, b in stops
    )
    return (
        f'<div style="background:{theme.surface};color:{theme.text};border:1px solid {theme.border};'
        f'border-radius:12px;padding:12px;">'
        f'<div style="color:{theme.primary};font-weight:600;margin-bottom:8px;">Preview</div>{spans}</div>'
    )


def render_embed_builder():
    """Theme a calculator and generate an iframe embed code."""
    st.session_state.setdefault("embed_theme", DEFAULT_THEME.model_dump())
    theme = merge_theme(st.session_state["embed_theme"])
    st.subheader("Embed Builder")
    st.caption("Customize colors, preview, then generate an embed code you can paste on any website.")
    left, right = st.columns(2)
    with left:
        keys = list(CALCULATORS)
        calculator = st.selectbox(
            "Calculator", keys, format_func=CALCULATORS.get, key="embed_calculator"
        )
        origin = st.text_input("App URL", value="http://localhost:8501", key="embed_origin")
        colors = {
            name: st.color_picker(label, value=getattr(theme, name), key=f"embed_color_{name}")
            for name, label in COLOR_FIELDS.items()
        }
        chart = {
            name: st.color_picker(label, value=getattr(theme.chart, name), key=f"embed_chart_{name}")
            for name, label in CHART_FIELDS.items()
        }
    theme = merge_theme({**colors, "ring": theme.ring, "chart": {**theme.chart.model_dump(), **chart}})
    st.session_state["embed_theme"] = theme.model_dump()
    with right:
        st.markdown(_swatches(theme), unsafe_allow_html=True)
        if st.button("Generate embed code"):
            st.session_state["embed_code"] = build_embed_code(origin, calculator, theme)
        code = st.session_state.get("embed_code")
        if code:
            st.code(code, language="html")
            st.caption("Tip: you can adjust the iframe height/width in the embed code to fit your page.")
    return theme
