"""Theme preference stored in the `lifelink_theme` slot."""
import logging

from domain.constants import THEME_SLOT, THEMES
from domain.errors import PersistenceWriteFailure
from services import persistence

logger = logging.getLogger(__name__)


def load_theme(system_default: str = 'light') -> str:
    """Stored theme, or the environment's preference when nothing valid is stored."""
    stored = persistence.load_value(THEME_SLOT)
    if stored in THEMES:
        return stored
    return system_default if system_default in THEMES else 'light'


def save_theme(theme: str) -> bool:
    if theme not in THEMES:
        raise ValueError(f"unknown theme: {theme!r}")
    try:
        persistence.atomic_write(THEME_SLOT, theme)
    except PersistenceWriteFailure as e:
        logger.error("Failed to save theme preference: %s", e)
        return False
    return True


def toggle_theme(theme: str) -> str:
    return 'light' if theme == 'dark' else 'dark'
