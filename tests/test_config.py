import pytest
from pydantic import ValidationError

from querypage.core.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.default_page_size == 50
    assert settings.max_page_size == 200
    assert settings.debug is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("MAX_PAGE_SIZE", "100")
    monkeypatch.setenv("MONGODB_DB_NAME", "paging_test")
    settings = Settings()
    assert settings.default_page_size == 25
    assert settings.max_page_size == 100
    assert settings.mongodb_db_name == "paging_test"


def test_rejects_non_positive_page_size(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
