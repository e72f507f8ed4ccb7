import streamlit as st

from domain.errors import AuthError
from domain.models import Role
from services.context import AppContext
from ui.state import run_async

DEMO_BUTTONS = (
    (Role.DONOR, "❤️ Donor Demo"),
    (Role.ADMIN, "🛡️ Admin Demo"),
    (Role.HOSPITAL, "🏥 Hospital Demo"),
)


def render_demo_buttons(ctx: AppContext, key_prefix: str = "demo") -> bool:
    """Quick-access row: one button per role signing in as that role's first seeded account.

    Returns True when a sign-in happened (caller should rerun).
    """
    cols = st.columns(len(DEMO_BUTTONS))
    for col, (role, label) in zip(cols, DEMO_BUTTONS):
        if col.button(label, key=f"{key_prefix}_{role.value.lower()}", use_container_width=True):
            try:
                with st.spinner("Signing in..."):
                    account = run_async(ctx.session.demo_login(role))
            except AuthError as e:
                st.error(e.message)
                return False
            return account is not None
    return False
