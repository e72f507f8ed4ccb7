"""The shared `Dashboard` view: donors get their impact dashboard, hospitals their requests board."""
import streamlit as st

from domain.constants import MOCK_CENTERS
from domain.models import Role, center_from_dict
from services import directory
from services.context import AppContext
from services.router import View
from ui.components import stat_card


def donor_view(ctx: AppContext):
    me = ctx.session.current_user
    st.markdown(
        f"""
        <div class='ll-hero'>
          <span class='badge' style='background:rgba(255,255,255,.2);'>{directory.donor_tier(me)}</span>
          <h2 style='color:white; margin:.4rem 0 0;'>Welcome back, {me.name}</h2>
          <p style='opacity:.85;'>Your {me.blood_type} blood type is in high demand right now. You can help save 3 lives today.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if st.button("Schedule Donation", type="primary"):
        ctx.session.navigate(View.DONATE)
        st.rerun()

    c1, c2, c3, c4 = st.columns(4)
    stat_card(c1, "Lives Saved", me.lives_saved, "Impact Score: High")
    stat_card(c2, "Donations", me.total_donations,
              "Next milestone: 15" if me.total_donations > 0 else "Make your first!")
    stat_card(c3, "Blood Type", me.blood_type, "Universal Donor (RBC)")
    stat_card(c4, "Next Eligible", "Available Now", f"Last: {me.last_donation_date}")

    left, right = st.columns([2, 1])
    with left:
        with st.container(border=True):
            st.subheader("Recent Activity")
            if me.total_donations > 0:
                for _ in range(min(3, me.total_donations)):
                    st.markdown("🩸 **Whole Blood Donation** · Nanjing Drum Tower Hospital · 450ml")
                    st.caption("Completed · +300 Points")
            else:
                st.info("No donations yet. Schedule your first appointment!")
    with right:
        with st.container(border=True):
            st.subheader("Urgent Needs Nearby")
            for raw in MOCK_CENTERS[:2]:
                center = center_from_dict(raw)
                st.markdown(f"**{center.name}** <span class='badge red'>Urgent A+</span>", unsafe_allow_html=True)
                st.caption(f"📍 {center.distance}")
            if st.button("Find More Centers", use_container_width=True):
                ctx.session.navigate(View.DONATE)
                st.rerun()


def hospital_view(ctx: AppContext):
    st.header("My Requests")
    st.info("Hospital Request Dashboard (Under Construction)")


_BY_ROLE = {
    Role.DONOR: donor_view,
    Role.HOSPITAL: hospital_view,
}


def view(ctx: AppContext):
    _BY_ROLE.get(ctx.session.role, donor_view)(ctx)
