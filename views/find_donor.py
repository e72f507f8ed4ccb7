import streamlit as st

from domain.constants import BLOOD_TYPES
from services import directory
from services.context import AppContext
from ui.components import donor_card


def view(ctx: AppContext):
    c1, c2 = st.columns([4, 1])
    c1.header("Find Donors")
    if c2.button("Create Blood Request", type="primary"):
        st.toast("Blood request drafted. The request board is coming soon.")

    f1, f2 = st.columns([3, 1])
    location = f1.text_input("Search by city or location...", key="donor_location")
    blood_type = f2.selectbox("Blood type", [""] + BLOOD_TYPES, key="donor_blood",
                              format_func=lambda v: v or "All Blood Types")

    found = directory.filter_donors(ctx.accounts, blood_type=blood_type, location=location)
    if not found:
        st.info("No donors found matching your criteria.")
        return
    cols = st.columns(3)
    for i, donor in enumerate(found):
        with cols[i % 3]:
            donor_card(donor)
