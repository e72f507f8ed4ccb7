"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection (light/dark palettes) and status/role badges.
- `cards`: stat, center, doctor and donor cards.
- `tables`: the account table used by the admin views.
- `auth_form`: the sign-in / registration form.
- `demo`: quick demo sign-in buttons.
- `chat`: the floating assistant widget.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    status_badge,
    role_badge,
)

from .cards import (
    stat_card,
    center_card,
    doctor_card,
    donor_card,
)

from .tables import (
    accounts_frame,
    dataframe_with_status,
)

from .demo import (
    render_demo_buttons,
)

from .chat import (
    render_floating_chat,
)
