import streamlit as st

from domain.errors import AuthError
from services.context import AppContext
from ui.components import auth_form, render_demo_buttons
from ui.state import run_async


def view(ctx: AppContext):
    if 'auth_is_login' not in st.session_state:
        st.session_state.auth_is_login = True
    is_login = st.session_state.auth_is_login

    hero, form_col = st.columns([1, 1], gap="large")
    with hero:
        st.markdown(
            """
            <div class='ll-hero' style='min-height:420px; display:flex; flex-direction:column; justify-content:space-between;'>
              <div style='font-size:1.8rem; font-weight:700;'>🩸 LifeLink</div>
              <div>
                <div style='font-size:2.4rem; font-weight:700; line-height:1.15;'>Every drop creates a<br>ripple of life.</div>
                <p style='opacity:.85; margin-top:1rem;'>Join the ecosystem connecting donors, hospitals, and heroes.</p>
              </div>
              <div style='font-size:.8rem; opacity:.7;'>© LifeLink demo</div>
            </div>
            """,
            unsafe_allow_html=True,
        )

    with form_col:
        if not is_login and st.button("← Back to Login"):
            st.session_state.auth_is_login = True
            st.rerun()
        st.header("Welcome back" if is_login else "Join as a Donor")
        st.caption("Enter your credentials to access your dashboard." if is_login
                   else "Start your journey as a life saver today.")

        if render_demo_buttons(ctx):
            st.rerun()

        submitted = auth_form.render(is_login)
        if submitted:
            try:
                with st.spinner("Signing in..." if is_login else "Creating your account..."):
                    if is_login:
                        account = run_async(ctx.session.login(submitted['email'], submitted['password']))
                    else:
                        account = run_async(ctx.session.register(**submitted))
            except AuthError as e:
                st.error(e.message)
            else:
                if account is not None:
                    st.rerun()

        toggle_label = "Create a donor account" if is_login else "Sign in to existing account"
        if st.button(toggle_label, type="tertiary"):
            st.session_state.auth_is_login = not is_login
            st.rerun()
