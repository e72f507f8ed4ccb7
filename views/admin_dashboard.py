import streamlit as st

from services import directory
from services.context import AppContext
from ui.components import accounts_frame, dataframe_with_status, stat_card


def _header():
    c1, c2 = st.columns([4, 1])
    c1.header("System Overview")
    c2.markdown("<span class='badge' style='background:#7C3AED;'>🛡️ Admin Access</span>", unsafe_allow_html=True)


def view(ctx: AppContext):
    _header()
    st.markdown("Platform-wide numbers across every registered account.")
    stats = directory.admin_stats(ctx.accounts)

    c1, c2, c3, c4 = st.columns(4)
    stat_card(c1, "Total Users", stats['total_users'], "Across all roles")
    stat_card(c2, "Total Donors", stats['total_donors'], "Registered donors")
    stat_card(c3, "Total Donations", stats['total_donations'], "Units collected")
    stat_card(c4, "Lives Impacted", stats['lives_saved'], "Estimated impact")

    st.subheader("Registered Users")
    dataframe_with_status(accounts_frame(ctx.accounts))
