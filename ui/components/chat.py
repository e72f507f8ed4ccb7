import html

import streamlit as st

from services.context import AppContext
from ui.state import run_async


def _bubble(role: str, text: str) -> str:
    body = "<br>".join(html.escape(line) for line in text.split("\n"))
    return f"<div class='ll-bubble {role}'>{body}</div>"


def render_floating_chat(ctx: AppContext):
    """Sidebar chat widget (collapsed by default) talking to the LifeLink assistant."""
    with st.sidebar.expander("💬 Ask LifeLink AI", expanded=st.session_state.get('chat_open', False)):
        st.caption("Powered by Gemini")
        for msg in ctx.transcript:
            st.markdown(_bubble(msg.role, msg.text), unsafe_allow_html=True)
        with st.form("chat_form", clear_on_submit=True):
            text = st.text_input("Message", placeholder="Ask about eligibility, health tips...",
                                 label_visibility="collapsed")
            sent = st.form_submit_button("Send ➤", use_container_width=True)
        st.caption("AI can make mistakes. Please consult with a medical professional.")
        if sent and text.strip():
            st.session_state.chat_open = True
            with st.spinner("LifeLink AI is typing..."):
                run_async(ctx.ask(text))
            st.rerun()
