import streamlit as st
from typing import Any

from domain.models import Account, Center, Doctor
from .base import status_badge


def stat_card(column, title: str, value: Any, subtitle: str = ""):
    """
    Displays a single headline metric inside the given column.
    """
    with column:
        with st.container(border=True):
            st.metric(title, value)
            if subtitle:
                st.caption(subtitle)


def center_card(center: Center, key: str, show_book: bool = True) -> bool:
    """
    Displays a donation center. Returns True when its booking button was pressed.
    """
    with st.container(border=True):
        c1, c2 = st.columns([5, 1])
        with c1:
            st.markdown(f"**{center.name}**")
            st.caption(center.address)
            st.markdown(
                f"<span class='badge green'>🕒 Open until {center.open_until}</span>"
                f"<span class='ll-muted'>📍 {center.distance}</span>",
                unsafe_allow_html=True,
            )
        c2.markdown(f"**★ {center.rating}**")
        if show_book:
            return st.button("Book Appointment", key=key, use_container_width=True)
    return False


def doctor_card(doctor: Doctor, key: str, booked: bool = False) -> bool:
    """Doctor tile with a booking button; shows a confirmation while `booked`."""
    with st.container(border=True):
        if doctor.image:
            st.image(doctor.image, width=96)
        st.markdown(f"**{doctor.name}**")
        st.caption(f"{doctor.specialty} · {doctor.hospital}")
        st.markdown(f"★ {doctor.rating}" + (f" · {doctor.experience}" if doctor.experience else ""))
        if doctor.availability:
            st.caption(f"📅 {doctor.availability}")
        if booked:
            st.success("Appointment requested!")
            return False
        return st.button("Book Appointment", key=key, use_container_width=True)


def donor_card(donor: Account):
    with st.container(border=True):
        c1, c2 = st.columns([1, 4])
        c1.markdown(f"### {donor.blood_type}")
        with c2:
            st.markdown(f"**{donor.name}** " + status_badge("Available"), unsafe_allow_html=True)
            st.caption(f"📍 {donor.location or 'Location not specified'}")
            st.caption(f"Last Donation: {donor.last_donation_date}")
        st.link_button("✉️ Contact", f"mailto:{donor.email}", use_container_width=True)
