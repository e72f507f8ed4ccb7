import json
import logging

from domain.constants import USERS_SLOT
from domain.errors import PersistenceWriteFailure
from domain.models import Account, Role
from services import persistence
from services import users as user_store


def make_account(i, role=Role.DONOR):
    return Account(id=f"t{i}", name=f"Test User{i}", email=f"t{i}@x.com", password='pw', role=role)


def test_load_falls_back_to_seed_when_missing(data_dir):
    accounts = user_store.load()
    assert len(accounts) == 5
    assert [a.role for a in accounts].count(Role.DONOR) == 3
    assert [a.role for a in accounts].count(Role.ADMIN) == 1
    assert [a.role for a in accounts].count(Role.HOSPITAL) == 1


def test_load_falls_back_to_seed_when_malformed(data_dir, caplog):
    (data_dir / f"{USERS_SLOT}.json").write_text("{not json", encoding='utf-8')
    assert len(user_store.load()) == 5

    (data_dir / f"{USERS_SLOT}.json").write_text(json.dumps({'users': []}), encoding='utf-8')
    with caplog.at_level(logging.WARNING):
        assert len(user_store.load()) == 5
    assert "not a list" in caplog.text

    (data_dir / f"{USERS_SLOT}.json").write_text(json.dumps([{'id': 'x', 'role': 'PIRATE'}]), encoding='utf-8')
    assert len(user_store.load()) == 5


def test_seed_copies_are_independent(data_dir):
    first = user_store.load()
    first[0].name = 'Changed'
    assert user_store.load()[0].name == 'Alex Johnson'


def test_save_load_save_is_byte_identical(data_dir):
    accounts = user_store.load()
    user_store.register(accounts, make_account(1))
    before = persistence.read_raw(USERS_SLOT)
    assert before

    user_store.save(user_store.load())
    assert persistence.read_raw(USERS_SLOT) == before


def test_persisted_layout_uses_record_field_names(data_dir):
    user_store.save(user_store.load())
    raw = json.loads(persistence.read_raw(USERS_SLOT))
    assert raw[0]['email'] == 'alex@test.com'
    assert raw[0]['bloodType'] == 'O+'
    assert raw[0]['totalDonations'] == 12
    assert raw[0]['role'] == 'DONOR'
    assert raw[0]['status'] == 'Active'


def test_register_appends_in_order_and_persists(data_dir):
    accounts = user_store.load()
    user_store.register(accounts, make_account(1))
    user_store.register(accounts, make_account(2))
    assert [a.id for a in accounts[-2:]] == ['t1', 't2']

    reloaded = user_store.load()
    assert [a.id for a in reloaded] == [a.id for a in accounts]


def test_save_failure_is_logged_and_swallowed(data_dir, monkeypatch, caplog):
    def boom(key, data):
        raise PersistenceWriteFailure("disk full")
    monkeypatch.setattr(persistence, 'atomic_write', boom)

    accounts = user_store.load()
    with caplog.at_level(logging.ERROR):
        ok = user_store.save(accounts)
        user_store.register(accounts, make_account(9))
    assert ok is False
    assert accounts[-1].id == 't9'
    assert "disk full" in caplog.text


def test_atomic_write_wraps_os_errors(data_dir, monkeypatch):
    monkeypatch.setattr('services.persistence.DATA_DIR', str(data_dir / 'file.txt' / 'nested'))
    (data_dir / 'file.txt').write_text('x')
    try:
        persistence.atomic_write(USERS_SLOT, [])
    except PersistenceWriteFailure as e:
        assert USERS_SLOT in e.message
    else:
        assert False, "Expected PersistenceWriteFailure"


def test_lookups_are_case_insensitive(data_dir):
    accounts = user_store.load()
    assert user_store.find_by_email(accounts, '  ALEX@Test.com ').id == '1'
    assert user_store.email_exists(accounts, 'Admin@LifeLink.com')
    assert not user_store.email_exists(accounts, 'nobody@x.com')
    assert user_store.first_with_role(accounts, Role.HOSPITAL).id == 'hosp1'
    assert user_store.first_with_role([], Role.ADMIN) is None
