import importlib

import pytest

from payroll_portal.config import get_settings_module


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "payroll_portal.config.production"),
        ("prod", "payroll_portal.config.production"),
        ("TEST", "payroll_portal.config.testing"),
        ("anything", "payroll_portal.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_default_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "payroll_portal.config.development"


def test_testing_settings_use_memory_backend():
    settings = importlib.import_module("payroll_portal.config.testing")

    assert settings.STORAGE_BACKEND == "memory"
    assert settings.AUTO_INIT_DB is False
    assert settings.RATE_LIMIT_PER_MINUTE == 0
