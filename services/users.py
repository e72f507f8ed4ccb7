"""User store: loading, saving, registration and lookup over the account roster.

The roster lives in the `lifelink_users` slot as a JSON array of account
records. Every mutation is followed by an immediate save; a failed save is
logged and swallowed because the in-memory roster stays authoritative for the
running session.
"""
from __future__ import annotations
import copy
import logging
from typing import List, Optional

from domain.constants import INITIAL_USERS, USERS_SLOT
from domain.errors import PersistenceWriteFailure
from domain.models import Account, Role, account_from_dict, account_to_dict
from services import persistence

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or '').strip().lower()


def seed_accounts() -> List[Account]:
    return [account_from_dict(copy.deepcopy(d)) for d in INITIAL_USERS]


def load() -> List[Account]:
    """Load the roster, falling back to the seed roster on missing or malformed data."""
    raw = persistence.load_value(USERS_SLOT)
    if raw is None:
        return seed_accounts()
    if not isinstance(raw, list):
        logger.warning("Stored roster is not a list (%s); using seed roster", type(raw).__name__)
        return seed_accounts()
    try:
        return [account_from_dict(d) for d in raw]
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Stored roster is malformed (%s); using seed roster", e)
        return seed_accounts()


def save(accounts: List[Account]) -> bool:
    """Overwrite the persisted roster. Never raises; returns False if the write failed."""
    try:
        persistence.atomic_write(USERS_SLOT, [account_to_dict(a) for a in accounts])
    except PersistenceWriteFailure as e:
        logger.error("Failed to save users to local storage: %s", e)
        return False
    return True


def register(accounts: List[Account], account: Account) -> List[Account]:
    """Append `account` and persist. Uniqueness is checked by the caller."""
    accounts.append(account)
    save(accounts)
    return accounts


def find_by_email(accounts: List[Account], email: str) -> Optional[Account]:
    needle = normalize_email(email)
    return next((a for a in accounts if normalize_email(a.email) == needle), None)


def email_exists(accounts: List[Account], email: str) -> bool:
    return find_by_email(accounts, email) is not None


def first_with_role(accounts: List[Account], role: Role) -> Optional[Account]:
    return next((a for a in accounts if a.role == role), None)
