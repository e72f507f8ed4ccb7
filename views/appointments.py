import time

import streamlit as st

from domain.constants import MOCK_DOCTORS
from domain.models import doctor_from_dict
from services import directory
from services.context import AppContext
from ui.components import doctor_card

BOOKED_CONFIRMATION_SECONDS = 3.0


def _recently_booked() -> str:
    booked = st.session_state.get('booked_doctor')
    if not booked:
        return ''
    doctor_id, at = booked
    if time.monotonic() - at > BOOKED_CONFIRMATION_SECONDS:
        del st.session_state['booked_doctor']
        return ''
    return doctor_id


def view(ctx: AppContext):
    st.header("Doctor Appointments")
    st.caption("Book a consultation before or after your donation.")
    doctors = [doctor_from_dict(d) for d in MOCK_DOCTORS]

    search = st.text_input("Search doctors or hospitals...", key="doctor_search")
    specialty = st.radio("Specialty", directory.specialties(doctors), horizontal=True, key="doctor_specialty")

    found = directory.filter_doctors(doctors, search, specialty)
    if not found:
        st.info("No doctors match your search.")
        return

    booked_id = _recently_booked()
    cols = st.columns(3)
    for i, doctor in enumerate(found):
        with cols[i % 3]:
            if doctor_card(doctor, key=f"book_doctor_{doctor.id}", booked=doctor.id == booked_id):
                st.session_state.booked_doctor = (doctor.id, time.monotonic())
                st.rerun()
