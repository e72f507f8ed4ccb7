"""Role-based view routing.

Each role maps to a RoleRoute holding its landing view and its sidebar menu.
Profile is shared by every role and is never gated.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from domain.models import Role

logger = logging.getLogger(__name__)


class View(str, Enum):
    DASHBOARD = 'Dashboard'
    DONATE = 'Donate'
    APPOINTMENTS = 'Appointments'
    PROFILE = 'Profile'
    SYSTEM_OVERVIEW = 'SystemOverview'
    USER_MANAGEMENT = 'UserManagement'
    FIND_DONOR = 'FindDonor'


SHARED_VIEWS = frozenset({View.PROFILE})


@dataclass(frozen=True)
class RoleRoute:
    default_view: View
    menu: Tuple[Tuple[View, str], ...]


ROUTES: Dict[Role, RoleRoute] = {
    Role.ADMIN: RoleRoute(
        default_view=View.SYSTEM_OVERVIEW,
        menu=(
            (View.SYSTEM_OVERVIEW, "System Overview"),
            (View.USER_MANAGEMENT, "Manage Users"),
        ),
    ),
    Role.HOSPITAL: RoleRoute(
        default_view=View.FIND_DONOR,
        menu=(
            (View.FIND_DONOR, "Find Donors"),
            (View.DASHBOARD, "My Requests"),
            (View.PROFILE, "Hospital Profile"),
        ),
    ),
    Role.DONOR: RoleRoute(
        default_view=View.DASHBOARD,
        menu=(
            (View.DASHBOARD, "Dashboard"),
            (View.DONATE, "Find Center"),
            (View.APPOINTMENTS, "Doctor Appointments"),
            (View.PROFILE, "Profile"),
        ),
    ),
}


def default_view(role: Role) -> View:
    return ROUTES[role].default_view


def allowed_views(role: Role) -> Tuple[Tuple[View, str], ...]:
    return ROUTES[role].menu


def is_allowed(role: Role, view: View) -> bool:
    return view in SHARED_VIEWS or any(v == view for v, _ in ROUTES[role].menu)


def navigate(role: Role, requested: View) -> View:
    """Return `requested` if the role may see it, else the role's default view."""
    if is_allowed(role, requested):
        return requested
    fallback = default_view(role)
    logger.debug("View %s not allowed for %s; clamped to %s", requested.value, role.value, fallback.value)
    return fallback


def show_back_button(role: Role, current: View) -> bool:
    return current != default_view(role)
