import streamlit as st
from typing import Dict, Optional

from domain.constants import BLOOD_TYPES, DEMO_PASSWORD


def render(is_login: bool, key_prefix: str = "auth") -> Optional[Dict[str, str]]:
    """
    Renders the sign-in / registration form.

    Args:
        is_login (bool): Sign-in form when True, donor registration form otherwise.
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        Dict[str, str]: The submitted fields, or None if not submitted / invalid.
    """
    mode = "login" if is_login else "register"
    with st.form(f"form_{key_prefix}_{mode}"):
        name = blood_type = location = ""
        if not is_login:
            name = st.text_input("Full Name", key=f"{key_prefix}_name")
            c1, c2 = st.columns(2)
            blood_type = c1.selectbox("Blood Type", [""] + BLOOD_TYPES, key=f"{key_prefix}_blood",
                                      format_func=lambda v: v or "Type")
            location = c2.text_input("City", key=f"{key_prefix}_location")

        email = st.text_input("Email address", key=f"{key_prefix}_email_{mode}")
        password = st.text_input("Password", value=DEMO_PASSWORD, type="password",
                                 key=f"{key_prefix}_password_{mode}")
        st.caption(f"Default password: {DEMO_PASSWORD}")

        submitted = st.form_submit_button("Sign In ➜" if is_login else "Create Account ➜",
                                          use_container_width=True, type="primary")
        if submitted:
            if not email.strip():
                st.error("Please enter your email address.")
                return None
            if not is_login and not name.strip():
                st.error("Please enter your full name.")
                return None
            return {
                'name': name,
                'email': email,
                'password': password,
                'blood_type': blood_type,
                'location': location,
            }

    return None
