import streamlit as st

from domain.models import Role
from services.context import AppContext
from ui.components import accounts_frame, dataframe_with_status

ALL = "All"


def view(ctx: AppContext):
    """Read-only roster browser for admins (accounts are never edited or deleted)."""
    st.header("👥 Manage Users")

    c1, c2 = st.columns([3, 1])
    query = c1.text_input("Search by name or email", key="um_query").strip().lower()
    role = c2.selectbox("Role", [ALL] + [r.value for r in Role], key="um_role")

    shown = [
        a for a in ctx.accounts
        if (role == ALL or a.role.value == role)
        and (not query or query in a.name.lower() or query in a.email.lower())
    ]
    st.caption(f"Showing {len(shown)} of {len(ctx.accounts)} accounts")
    dataframe_with_status(accounts_frame(shown))
