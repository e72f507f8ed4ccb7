import logging

import pytest

from domain.constants import THEME_SLOT
from domain.errors import PersistenceWriteFailure
from services import persistence, preferences


def test_missing_theme_uses_environment_preference(data_dir):
    assert preferences.load_theme('dark') == 'dark'
    assert preferences.load_theme('light') == 'light'
    assert preferences.load_theme('sepia') == 'light'


def test_saved_theme_wins(data_dir):
    assert preferences.save_theme('dark')
    assert persistence.read_raw(THEME_SLOT) == '"dark"'
    assert preferences.load_theme('light') == 'dark'


def test_invalid_stored_theme_is_ignored(data_dir):
    (data_dir / f"{THEME_SLOT}.json").write_text('"purple"', encoding='utf-8')
    assert preferences.load_theme('dark') == 'dark'


def test_unknown_theme_is_rejected(data_dir):
    with pytest.raises(ValueError):
        preferences.save_theme('purple')


def test_theme_write_failure_is_swallowed(data_dir, monkeypatch, caplog):
    def boom(key, data):
        raise PersistenceWriteFailure("read-only")
    monkeypatch.setattr(persistence, 'atomic_write', boom)
    with caplog.at_level(logging.ERROR):
        assert preferences.save_theme('dark') is False
    assert "read-only" in caplog.text


def test_context_toggle_persists(ctx):
    start = ctx.theme
    flipped = ctx.toggle_theme()
    assert flipped != start
    assert preferences.load_theme(start) == flipped
    assert preferences.toggle_theme(preferences.toggle_theme('dark')) == 'dark'
