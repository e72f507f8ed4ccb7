import logging
import os

import streamlit as st
from dotenv import load_dotenv

from domain.models import Role
from services import directory, router
from services.router import View
from ui.components import inject_base_css, render_floating_chat
from ui.state import get_context

# Import the page rendering functions from the view modules
from views import (admin_dashboard, appointments, auth, dashboard, donate, find_donor, profile,
                   user_management)

# --- Page Registry ---
# Maps each View to its page title and rendering function. Which role may
# reach which view is decided by services.router, not here.
PAGE_REGISTRY = {
    View.DASHBOARD: {"title": "Dashboard", "render_func": dashboard.view},
    View.DONATE: {"title": "Find Center", "render_func": donate.view},
    View.APPOINTMENTS: {"title": "Doctor Appointments", "render_func": appointments.view},
    View.PROFILE: {"title": "Profile", "render_func": profile.view},
    View.SYSTEM_OVERVIEW: {"title": "System Overview", "render_func": admin_dashboard.view},
    View.USER_MANAGEMENT: {"title": "Manage Users", "render_func": user_management.view},
    View.FIND_DONOR: {"title": "Find Donors", "render_func": find_donor.view},
}


def configure_logging():
    level = os.getenv('LIFELINK_LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def render_sidebar(ctx):
    session = ctx.session
    me = session.current_user
    st.sidebar.markdown("## 🩸 LifeLink")

    for view, label in router.allowed_views(me.role):
        active = session.current_view == view
        if st.sidebar.button(label, key=f"nav_{view.value}", use_container_width=True,
                             type="primary" if active else "secondary"):
            session.navigate(view)
            st.rerun()

    if me.role == Role.DONOR:
        st.sidebar.markdown("**🏅 Platinum Status**")
        st.sidebar.progress(0.8, text="80% to next reward tier")

    dark = st.sidebar.toggle("🌙 Dark mode", value=ctx.theme == 'dark', key="theme_toggle")
    if dark != (ctx.theme == 'dark'):
        ctx.toggle_theme()
        st.rerun()

    render_floating_chat(ctx)

    st.sidebar.markdown("---")
    c1, c2 = st.sidebar.columns([1, 3])
    c1.markdown(f"**{directory.initials(me.name)}**")
    if c2.button(f"{me.name}\n\n{me.role.value}", key="nav_profile_footer", type="tertiary"):
        session.navigate(View.PROFILE)
        st.rerun()
    if st.sidebar.button("⎋ Sign Out", key="sign_out", use_container_width=True):
        session.logout()
        st.rerun()


def main():
    """
    Main application router.

    Signed-out visitors get the auth screen. Signed-in users get the sidebar
    menu of their role and the page for the session's current view.
    """
    load_dotenv()
    configure_logging()
    st.set_page_config(page_title="LifeLink", page_icon="🩸", layout="wide")

    ctx = get_context()
    inject_base_css(ctx.theme)

    if not ctx.session.is_authenticated:
        auth.view(ctx)
        return

    render_sidebar(ctx)

    if ctx.session.show_back_button:
        if st.button("← Back to Dashboard", key="back_home"):
            ctx.session.go_home()
            st.rerun()

    current = ctx.session.navigate(ctx.session.current_view)
    PAGE_REGISTRY[current]["render_func"](ctx)


if __name__ == "__main__":
    main()
