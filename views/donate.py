import streamlit as st

from domain.constants import MOCK_CENTERS
from domain.models import center_from_dict
from services import directory
from services.context import AppContext
from ui.components import center_card


def view(ctx: AppContext):
    centers = [center_from_dict(c) for c in MOCK_CENTERS]

    left, right = st.columns([1, 2])
    with left:
        st.header("Donation Centers")
        query = st.text_input("Search area in Nanjing...", key="center_query", placeholder="Search area in Nanjing...",
                              label_visibility="collapsed")
        found = directory.filter_centers(centers, query)
        st.caption(f"Found {len(found)} locations near Nanjing")
        for c in found:
            if center_card(c, key=f"book_center_{c.id}"):
                st.toast(f"Appointment request sent to {c.name}")
    with right:
        with st.container(border=True):
            st.image("https://picsum.photos/seed/map/1200/800", use_container_width=True)
            st.caption("Map View: interactive map integration would go here.")
