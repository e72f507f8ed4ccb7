import asyncio

import pytest

from domain.errors import (AccountNotFound, EmailAlreadyRegistered, InvalidCredentials,
                           NoAccountForRole)
from domain.models import Account, Role
from services import users as user_store
from services.router import View
from services.session import SessionManager


def make_manager(accounts=None):
    return SessionManager(accounts if accounts is not None else user_store.load(),
                          login_delay=0, demo_delay=0)


def test_initial_state_is_logged_out(data_dir):
    mgr = make_manager()
    assert not mgr.is_authenticated
    assert mgr.current_view is None
    assert mgr.show_back_button is False
    assert mgr.navigate(View.DASHBOARD) is None


def test_login_with_stored_password_and_normalization(data_dir):
    mgr = make_manager()
    mgr.accounts[0].password = 'secret'
    account = asyncio.run(mgr.login('  ALEX@test.COM ', ' secret '))
    assert account.id == '1'
    assert mgr.current_user is account
    assert mgr.current_view == View.DASHBOARD


def test_universal_password_unlocks_any_account(data_dir):
    mgr = make_manager()
    for a in mgr.accounts:
        a.password = 'something-else'
    for a in list(mgr.accounts):
        assert asyncio.run(mgr.login(a.email, '1234')) is a


def test_wrong_password_fails_and_keeps_state(data_dir):
    mgr = make_manager()
    with pytest.raises(InvalidCredentials) as exc:
        asyncio.run(mgr.login('alex@test.com', 'wrong'))
    assert "1234" in exc.value.message
    assert not mgr.is_authenticated
    assert asyncio.run(mgr.login('alex@test.com', '1234')).email == 'alex@test.com'


def test_unknown_email_fails_with_account_not_found(data_dir):
    mgr = make_manager()
    for password in ('1234', 'anything', ''):
        with pytest.raises(AccountNotFound):
            asyncio.run(mgr.login('nonexistent@x.com', password))
    assert not mgr.is_authenticated


def test_register_scenario_jane_doe(data_dir):
    mgr = make_manager()
    account = asyncio.run(mgr.register(name='Jane Doe', email='JANE@X.com'))
    assert len(mgr.accounts) == 6
    assert account.role == Role.DONOR
    assert account.total_donations == 0
    assert account.lives_saved == 0
    assert account.last_donation_date == 'Never'
    assert account.status.value == 'Active'
    assert account.email == 'jane@x.com'
    assert account.password == '1234'
    assert account.blood_type == 'Unknown'
    assert mgr.current_user is account

    mgr.logout()
    assert asyncio.run(mgr.login('jane@x.com', '1234')) is account

    persisted = user_store.load()
    assert persisted[-1].email == 'jane@x.com'


def test_many_registrations_grow_roster(data_dir):
    mgr = make_manager()
    seed_size = len(mgr.accounts)
    ids = set()
    for i in range(7):
        a = asyncio.run(mgr.register(name=f'Donor {i}', email=f'donor{i}@x.com', password='pw',
                                     blood_type='O-', location=' Nanjing '))
        ids.add(a.id)
        assert a.role == Role.DONOR and a.total_donations == 0 and a.lives_saved == 0
        assert a.location == 'Nanjing'
    assert len(mgr.accounts) == seed_size + 7
    assert len(ids) == 7
    assert len({a.id for a in mgr.accounts}) == len(mgr.accounts)


def test_duplicate_email_is_rejected_and_roster_unchanged(data_dir):
    mgr = make_manager()
    before = [a.id for a in mgr.accounts]
    with pytest.raises(EmailAlreadyRegistered):
        asyncio.run(mgr.register(name='Dup', email='  Alex@TEST.com'))
    assert [a.id for a in mgr.accounts] == before
    assert not mgr.is_authenticated


def test_demo_login_per_role(data_dir):
    mgr = make_manager()
    assert asyncio.run(mgr.demo_login(Role.ADMIN)).id == 'admin'
    assert mgr.current_view == View.SYSTEM_OVERVIEW
    assert asyncio.run(mgr.demo_login(Role.HOSPITAL)).id == 'hosp1'
    assert mgr.current_view == View.FIND_DONOR
    assert asyncio.run(mgr.demo_login(Role.DONOR)).id == '1'
    assert mgr.current_view == View.DASHBOARD


def test_demo_login_without_account_for_role(data_dir):
    donors_only = [Account(id='d', name='D', email='d@x.com', password='1234', role=Role.DONOR)]
    mgr = make_manager(donors_only)
    with pytest.raises(NoAccountForRole) as exc:
        asyncio.run(mgr.demo_login(Role.HOSPITAL))
    assert exc.value.message == "No hospital account found."
    assert not mgr.is_authenticated


def test_logout_always_succeeds(data_dir):
    mgr = make_manager()
    mgr.logout()
    asyncio.run(mgr.demo_login(Role.DONOR))
    mgr.logout()
    assert mgr.current_user is None
    assert mgr.current_view is None


def test_navigation_is_gated_by_role(data_dir):
    mgr = make_manager()
    asyncio.run(mgr.demo_login(Role.DONOR))
    assert mgr.navigate(View.USER_MANAGEMENT) == View.DASHBOARD
    assert mgr.navigate(View.APPOINTMENTS) == View.APPOINTMENTS
    assert mgr.show_back_button
    assert mgr.go_home() == View.DASHBOARD
    assert not mgr.show_back_button


def test_every_session_change_notifies(data_dir):
    seen = []
    mgr = SessionManager(user_store.load(), login_delay=0, demo_delay=0, on_change=seen.append)
    asyncio.run(mgr.demo_login(Role.ADMIN))
    mgr.logout()
    assert [a.id if a else None for a in seen] == ['admin', None]
    assert mgr.generation == 2


def test_stale_login_is_discarded_after_logout(data_dir):
    mgr = SessionManager(user_store.load(), login_delay=0.05, demo_delay=0.05)

    async def scenario():
        pending = asyncio.create_task(mgr.login('alex@test.com', '1234'))
        await asyncio.sleep(0)
        mgr.logout()
        return await pending

    assert asyncio.run(scenario()) is None
    assert not mgr.is_authenticated


def test_stale_demo_login_does_not_override_newer_login(data_dir):
    mgr = SessionManager(user_store.load(), login_delay=0, demo_delay=0.05)

    async def scenario():
        slow = asyncio.create_task(mgr.demo_login(Role.ADMIN))
        await asyncio.sleep(0)
        await mgr.login('chen@test.com', '1234')
        return await slow

    assert asyncio.run(scenario()) is None
    assert mgr.current_user.email == 'chen@test.com'
