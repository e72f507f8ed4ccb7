from typing import List, Optional

import pandas as pd
import streamlit as st

from domain.models import Account
from .base import role_badge, status_badge


def accounts_frame(accounts: List[Account]) -> pd.DataFrame:
    rows = [{
        'Name': a.name,
        'Email': a.email,
        'Role': a.role.value,
        'Blood Type': a.blood_type or '-',
        'Location': a.location or 'N/A',
        'Donations': a.total_donations,
        'Status': a.status.value,
    } for a in accounts]
    return pd.DataFrame(rows, columns=['Name', 'Email', 'Role', 'Blood Type', 'Location', 'Donations', 'Status'])


def dataframe_with_status(df: Optional[pd.DataFrame], status_col: Optional[str] = 'Status',
                          role_col: Optional[str] = 'Role'):
    """Render a frame as HTML with status/role columns turned into badges."""
    if df is None or df.empty:
        st.caption("No users to display.")
        return
    df = df.copy()
    if status_col and status_col in df.columns:
        df[status_col] = df[status_col].apply(status_badge)
    if role_col and role_col in df.columns:
        df[role_col] = df[role_col].apply(role_badge)
    st.write(df.to_html(escape=False, index=False), unsafe_allow_html=True)
