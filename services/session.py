"""Session manager: who is signed in, and which view they are looking at.

States are LoggedOut (current_user is None) and LoggedIn(account). Sign-in
paths are coroutines that simulate network latency with asyncio.sleep. Each
session change bumps `generation`; a coroutine that finds the generation moved
while it was suspended drops its result instead of applying it.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Callable, List, Optional

from domain.constants import (DEMO_LOGIN_DELAY, DEMO_PASSWORD, LOGIN_DELAY, NEVER_DONATED,
                              UNKNOWN)
from domain.errors import (AccountNotFound, EmailAlreadyRegistered, InvalidCredentials,
                           NoAccountForRole)
from domain.models import Account, AccountStatus, Role
from services import router
from services import users as user_store
from services.router import View
from utils.ids import create_unique_id

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(self, accounts: List[Account], login_delay: float = LOGIN_DELAY,
                 demo_delay: float = DEMO_LOGIN_DELAY,
                 on_change: Optional[Callable[[Optional[Account]], None]] = None):
        self.accounts = accounts
        self.login_delay = login_delay
        self.demo_delay = demo_delay
        self.on_change = on_change
        self.current_user: Optional[Account] = None
        self.current_view: Optional[View] = None
        self.generation = 0

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def role(self) -> Optional[Role]:
        return self.current_user.role if self.current_user else None

    # --- transitions -----------------------------------------------------

    async def login(self, email: str, password: str) -> Optional[Account]:
        """Sign in by email/password. Returns None if superseded while waiting."""
        started = self.generation
        await asyncio.sleep(self.login_delay)
        if self.generation != started:
            return None
        email_input = user_store.normalize_email(email)
        pass_input = (password or '').strip()
        account = user_store.find_by_email(self.accounts, email_input)
        if account is None:
            logger.info("Login failed for %s: no such account", email_input)
            raise AccountNotFound()
        # Demo back-door: DEMO_PASSWORD unlocks every account.
        if account.password != pass_input and pass_input != DEMO_PASSWORD:
            logger.info("Login failed for %s: wrong password", email_input)
            raise InvalidCredentials()
        self._start(account)
        return account

    async def register(self, name: str, email: str, password: str = '',
                       blood_type: str = '', location: str = '') -> Optional[Account]:
        """Create a donor account and sign in as it."""
        started = self.generation
        await asyncio.sleep(self.login_delay)
        if self.generation != started:
            return None
        email_input = user_store.normalize_email(email)
        if user_store.email_exists(self.accounts, email_input):
            logger.info("Registration refused for %s: email taken", email_input)
            raise EmailAlreadyRegistered()
        account = Account(
            id=create_unique_id('u', (a.id for a in self.accounts)),
            name=(name or '').strip(),
            email=email_input,
            password=(password or '').strip() or DEMO_PASSWORD,
            role=Role.DONOR,
            blood_type=blood_type or UNKNOWN,
            total_donations=0,
            lives_saved=0,
            last_donation_date=NEVER_DONATED,
            location=(location or '').strip() or UNKNOWN,
            status=AccountStatus.ACTIVE,
        )
        user_store.register(self.accounts, account)
        logger.info("Registered donor %s (%s)", account.email, account.id)
        self._start(account)
        return account

    async def demo_login(self, role: Role) -> Optional[Account]:
        account = user_store.first_with_role(self.accounts, role)
        if account is None:
            raise NoAccountForRole(role)
        started = self.generation
        await asyncio.sleep(self.demo_delay)
        if self.generation != started:
            return None
        self._start(account)
        return account

    def logout(self):
        if self.current_user is not None:
            logger.info("Signed out %s", self.current_user.email)
        self.current_user = None
        self.current_view = None
        self._changed()

    # --- navigation ------------------------------------------------------

    def navigate(self, view: View) -> Optional[View]:
        if self.current_user is None:
            return None
        self.current_view = router.navigate(self.current_user.role, view)
        return self.current_view

    def go_home(self) -> Optional[View]:
        if self.current_user is None:
            return None
        self.current_view = router.default_view(self.current_user.role)
        return self.current_view

    @property
    def show_back_button(self) -> bool:
        if self.current_user is None or self.current_view is None:
            return False
        return router.show_back_button(self.current_user.role, self.current_view)

    # --- internals -------------------------------------------------------

    def _start(self, account: Account):
        self.current_user = account
        self.current_view = router.default_view(account.role)
        logger.info("Signed in %s as %s", account.email, account.role.value)
        self._changed()

    def _changed(self):
        self.generation += 1
        if self.on_change is not None:
            self.on_change(self.current_user)
