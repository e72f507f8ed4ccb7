import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Redirect every persisted slot into a fresh temporary directory."""
    d = tmp_path / 'data'
    d.mkdir()
    monkeypatch.setattr('services.persistence.DATA_DIR', str(d))
    return d


@pytest.fixture
def ctx(data_dir, monkeypatch):
    monkeypatch.delenv('GEMINI_API_KEY', raising=False)
    from services.chat import ChatService
    from services.context import AppContext
    return AppContext(chat=ChatService(api_key=''), login_delay=0, demo_delay=0)
