import streamlit as st

BRAND_RED = "#DC2626"  # red-600
BRAND_RED_DARK = "#991B1B"  # red-800
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
PURPLE = "#7C3AED"
BLUE = "#2563EB"

PALETTES = {
    'light': {'bg': '#F9FAFB', 'card': '#FFFFFF', 'text': '#1E293B', 'muted': '#6B7280', 'border': '#F3F4F6'},
    'dark': {'bg': '#111827', 'card': '#1F2937', 'text': '#F9FAFB', 'muted': '#9CA3AF', 'border': '#374151'},
}

ROLE_COLORS = {'ADMIN': PURPLE, 'HOSPITAL': BLUE, 'DONOR': GREEN}


def inject_base_css(theme: str = 'light'):
    """Inject app-wide CSS for the given theme. Must run on every rerun."""
    p = PALETTES.get(theme, PALETTES['light'])
    st.markdown(
        f"""
        <style>
        .stApp {{background:{p['bg']}; color:{p['text']};}}
        section[data-testid="stSidebar"] {{background:{p['card']};}}
        .ll-card {{
            background:{p['card']}; border:1px solid {p['border']}; border-radius:16px;
            padding:16px 18px; margin-bottom:12px; color:{p['text']};
        }}
        .ll-muted {{color:{p['muted']}; font-size:0.85rem;}}
        .ll-hero {{
            background:linear-gradient(90deg,{BRAND_RED},{BRAND_RED_DARK}); color:white;
            border-radius:24px; padding:28px 32px; margin-bottom:1.2rem;
        }}
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:#374151; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.red {{background:{BRAND_RED};}}
        .ll-avatar {{
            width:72px; height:72px; border-radius:50%; background:{p['border']}; color:{p['muted']};
            display:flex; align-items:center; justify-content:center; font-weight:700; font-size:1.5rem;
            margin:0 auto 12px;
        }}
        .ll-bubble {{padding:8px 12px; border-radius:14px; margin:4px 0; font-size:0.9rem; max-width:90%;}}
        .ll-bubble.user {{background:{BRAND_RED}; color:white; margin-left:auto;}}
        .ll-bubble.model {{background:{p['card']}; color:{p['text']}; border:1px solid {p['border']};}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(status: str) -> str:
    cls = "green" if status.lower() == "active" else "yellow"
    return f'<span class="badge {cls}">{status}</span>'


def role_badge(role: str) -> str:
    color = ROLE_COLORS.get(role, '#374151')
    return f'<span class="badge" style="background:{color};">{role}</span>'
