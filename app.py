import streamlit as st

from core.embed import is_embed_request
from core.presets import DISCLAIMER
from ui import RENDERERS
from ui.embed_builder import render_embed_builder
from ui.embed_page import render_embed_page
from ui.topbar import render_topbar


st.set_page_config(page_title="HOMECALC MORTGAGE CALCULATORS", layout="wide")


def render_main():
    view = render_topbar()
    if view == "embed":
        render_embed_builder()
    else:
        RENDERERS[view]()
    st.divider()
    st.caption(DISCLAIMER)


st.markdown(
    """
    <style>
    @media (max-width: 600px) {
        div[class^='stColumn'] {flex: 1 1 100% !important;}
    }
    input, select {width: 100% !important;}
    </style>
    """,
    unsafe_allow_html=True,
)

if is_embed_request(st.query_params):
    render_embed_page(st.query_params)
else:
    render_main()
