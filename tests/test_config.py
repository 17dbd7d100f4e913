"""
Tests for settings and translator construction from settings.
"""
import logging

from linguist.core import i18n
from linguist.core.config import Settings
from linguist.core.i18n import create_translator
from linguist.core.locale_detect import EnvLocaleDetector
from linguist.core.logging_config import ColoredFormatter, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LINGUIST_LOCALE", "LINGUIST_TRANSLATIONS_FILE", "LINGUIST_LOCALE_ENV", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)
        assert config.LINGUIST_LOCALE is None
        assert config.LINGUIST_TRANSLATIONS_FILE is None
        assert config.LINGUIST_LOCALE_ENV == "LANG"
        assert config.LOG_LEVEL == "INFO"

    def test_reads_environment(self, monkeypatch, data_file):
        monkeypatch.setenv("LINGUIST_LOCALE", "fr-FR")
        monkeypatch.setenv("LINGUIST_TRANSLATIONS_FILE", str(data_file))
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        config = Settings(_env_file=None)
        assert config.LINGUIST_LOCALE == "fr-FR"
        assert config.LINGUIST_TRANSLATIONS_FILE == data_file
        assert config.LOG_LEVEL == "DEBUG"

    def test_blank_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("LINGUIST_LOCALE", "  ")
        monkeypatch.setenv("LINGUIST_TRANSLATIONS_FILE", "")
        config = Settings(_env_file=None)
        assert config.LINGUIST_LOCALE is None
        assert config.LINGUIST_TRANSLATIONS_FILE is None


class TestGetSettings:
    def test_reads_environment_on_first_call(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert fresh_settings().LOG_LEVEL == "DEBUG"

    def test_cached(self, fresh_settings):
        assert fresh_settings() is fresh_settings()

    def test_create_translator_defaults_to_settings(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("LINGUIST_LOCALE", "fr-FR")
        monkeypatch.delenv("LINGUIST_TRANSLATIONS_FILE", raising=False)
        translator = create_translator()
        assert translator.locale == "fr-FR"
        assert translator.translate("common.cancel") == "Annuler"


class TestCreateTranslator:
    def test_locale_override(self):
        translator = create_translator(Settings(_env_file=None, LINGUIST_LOCALE="es-ES"))
        assert translator.locale == "es-ES"
        assert translator.translate("common.cancel") == "Cancelar"

    def test_detects_from_configured_variable(self, monkeypatch):
        monkeypatch.setattr(i18n, "platform_detector", lambda variable: EnvLocaleDetector(variable))
        monkeypatch.setenv("LINGUIST_TEST_LANG", "de_DE.UTF-8")
        translator = create_translator(
            Settings(_env_file=None, LINGUIST_LOCALE=None, LINGUIST_LOCALE_ENV="LINGUIST_TEST_LANG")
        )
        assert translator.locale == "de-DE"
        assert translator.translate("common.cancel") == "Abbrechen"

    def test_translations_file_replaces_embedded(self, data_file):
        translator = create_translator(
            Settings(_env_file=None, LINGUIST_LOCALE="fr-FR", LINGUIST_TRANSLATIONS_FILE=data_file)
        )
        assert translator.translate("home.title") == "Accueil"
        assert translator.translate("common.cancel") is None

    def test_unreadable_translations_file(self, tmp_path, caplog):
        missing = tmp_path / "missing.json"
        with caplog.at_level(logging.ERROR, logger="linguist.core.i18n"):
            translator = create_translator(
                Settings(_env_file=None, LINGUIST_LOCALE="en-US", LINGUIST_TRANSLATIONS_FILE=missing)
            )
        assert len(translator.store) == 0
        assert "No translations loaded" in caplog.text


class TestLogging:
    def test_setup_logging_with_file(self, tmp_path, root_logging):
        log_file = tmp_path / "logs" / "linguist.log"
        setup_logging(log_file=log_file, level="WARNING")
        assert root_logging.level == logging.WARNING
        assert any(isinstance(h.formatter, ColoredFormatter) for h in root_logging.handlers)
        logging.getLogger("linguist.test").warning("hello file")
        for handler in root_logging.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_package_loggers_follow_configured_level(self, root_logging):
        setup_logging(level="DEBUG")
        assert root_logging.level == logging.DEBUG
        assert logging.getLogger("linguist.embed").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("pydantic").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, root_logging):
        setup_logging(level="LOUD")
        assert root_logging.level == logging.INFO

    def test_colored_formatter_restores_levelname(self):
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        text = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[31mERROR\033[0m boom" == text
        assert record.levelname == "ERROR"
