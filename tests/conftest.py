"""
Shared fixtures for the linguist test suite.
"""
import logging
from pathlib import Path

import pytest

from linguist.core.config import get_settings
from linguist.core.i18n import Translator
from linguist.core.logging_config import LOGGING_CONFIG
from linguist.core.store import TranslationStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_file() -> Path:
    return DATA_DIR / "translations.json"


@pytest.fixture
def data_json(data_file) -> str:
    return data_file.read_text(encoding="utf-8")


@pytest.fixture
def store() -> TranslationStore:
    return TranslationStore()


@pytest.fixture
def translator(store) -> Translator:
    """Translator over an empty store with a fixed locale"""
    return Translator(store=store, locale="en-US")


@pytest.fixture
def loaded_translator(translator, data_json) -> Translator:
    assert translator.load(data_json)
    return translator


@pytest.fixture
def root_logging():
    """Restore root handlers and levels changed by setup_logging"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name in LOGGING_CONFIG:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
