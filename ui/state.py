"""Glue between Streamlit's per-browser session_state and the AppContext."""
import asyncio

import streamlit as st

from services.context import AppContext


def system_theme() -> str:
    """Color scheme reported by the browser/Streamlit, defaulting to light."""
    theme_type = st.context.theme.type
    return theme_type if theme_type in ('light', 'dark') else 'light'


def get_context() -> AppContext:
    if 'ctx' not in st.session_state:
        st.session_state.ctx = AppContext(system_theme=system_theme())
    return st.session_state.ctx


def run_async(coro):
    """Drive a coroutine to completion from the Streamlit script thread."""
    return asyncio.run(coro)
