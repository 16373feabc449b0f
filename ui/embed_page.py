import streamlit as st

from core.embed import calculator_from_query, theme_param_from_query
from core.theme import decode_theme_from_param, theme_style_block
from ui import RENDERERS


def render_embed_page(params):
    """Single themed calculator, as loaded inside an embed iframe."""
    theme = decode_theme_from_param(theme_param_from_query(params))
    st.markdown(theme_style_block(theme), unsafe_allow_html=True)
    return RENDERERS[calculator_from_query(params)]()
