import streamlit as st
from core.presets import CALCULATORS
from core.version import __version__

VIEWS = {**CALCULATORS, "embed": "Embed"}


def render_topbar():
    """Render the sticky top bar and return the selected view key."""
    st.markdown(
        """
        <style>
        .homecalc-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        .homecalc-topbar div[data-testid="stHorizontalBlock"] {align-items:center;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="homecalc-topbar">', unsafe_allow_html=True)
        left, right = st.columns([1, 5])
        with left:
            st.markdown(f"**HomeCalc v{__version__}**")
        with right:
            view = st.radio(
                "Calculator",
                list(VIEWS),
                format_func=VIEWS.get,
                horizontal=True,
                key="view",
                label_visibility="collapsed",
            )
        st.markdown("</div>", unsafe_allow_html=True)
    return view
