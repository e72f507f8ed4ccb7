from domain.models import Role
from services import router
from services.router import View


def test_default_view_per_role():
    assert router.default_view(Role.ADMIN) == View.SYSTEM_OVERVIEW
    assert router.default_view(Role.HOSPITAL) == View.FIND_DONOR
    assert router.default_view(Role.DONOR) == View.DASHBOARD
    # total over the enumeration
    assert set(router.ROUTES) == set(Role)


def test_menus_are_fixed_and_ordered():
    assert [v for v, _ in router.allowed_views(Role.ADMIN)] == [View.SYSTEM_OVERVIEW, View.USER_MANAGEMENT]
    assert [v for v, _ in router.allowed_views(Role.HOSPITAL)] == [View.FIND_DONOR, View.DASHBOARD, View.PROFILE]
    assert [v for v, _ in router.allowed_views(Role.DONOR)] == [
        View.DASHBOARD, View.DONATE, View.APPOINTMENTS, View.PROFILE]
    assert dict(router.allowed_views(Role.HOSPITAL))[View.DASHBOARD] == "My Requests"


def test_default_view_is_always_in_menu():
    for role in Role:
        assert router.default_view(role) in [v for v, _ in router.allowed_views(role)]


def test_navigate_clamps_disallowed_views():
    assert router.navigate(Role.DONOR, View.USER_MANAGEMENT) == View.DASHBOARD
    assert router.navigate(Role.ADMIN, View.USER_MANAGEMENT) == View.USER_MANAGEMENT
    assert router.navigate(Role.HOSPITAL, View.DONATE) == View.FIND_DONOR
    assert router.navigate(Role.ADMIN, View.DASHBOARD) == View.SYSTEM_OVERVIEW


def test_profile_is_reachable_by_every_role():
    for role in Role:
        assert router.navigate(role, View.PROFILE) == View.PROFILE


def test_navigate_result_is_always_reachable():
    for role in Role:
        for view in View:
            assert router.is_allowed(role, router.navigate(role, view))


def test_back_button_shown_away_from_default():
    assert not router.show_back_button(Role.DONOR, View.DASHBOARD)
    assert router.show_back_button(Role.DONOR, View.PROFILE)
    assert router.show_back_button(Role.ADMIN, View.USER_MANAGEMENT)
    assert not router.show_back_button(Role.HOSPITAL, View.FIND_DONOR)
