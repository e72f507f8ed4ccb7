import streamlit as st

from services import directory
from services.context import AppContext


def view(ctx: AppContext):
    me = ctx.session.current_user
    if not me:
        st.info("Please sign in first.")
        return

    _, mid, _ = st.columns([1, 2, 1])
    with mid:
        with st.container(border=True):
            st.markdown(f"<div class='ll-avatar'>{directory.initials(me.name)}</div>", unsafe_allow_html=True)
            st.markdown(f"<h2 style='text-align:center; margin:0;'>{me.name}</h2>", unsafe_allow_html=True)
            st.markdown(f"<p class='ll-muted' style='text-align:center;'>{me.email or 'user@lifelink.com'}</p>",
                        unsafe_allow_html=True)
            st.markdown(f"<p style='text-align:center;'><span class='badge'>Role: {me.role.value}</span></p>",
                        unsafe_allow_html=True)
            c1, c2 = st.columns(2)
            c1.metric("Blood Type", me.blood_type or '-')
            c2.metric("Donations", me.total_donations)
            if me.location:
                st.caption(f"📍 {me.location}")
            if st.button("Sign Out", key="profile_sign_out", use_container_width=True):
                ctx.session.logout()
                st.rerun()
