import pytest
from pydantic import ValidationError

from die_sir.config import DEFAULT_MAX_DICE, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DIE_SIR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DIE_SIR_MAX_DICE", raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.max_dice == DEFAULT_MAX_DICE


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DIE_SIR_LOG_LEVEL", "debug")
    monkeypatch.setenv("DIE_SIR_MAX_DICE", "50")

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.max_dice == 50


def test_keyword_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("DIE_SIR_MAX_DICE", "50")
    assert Settings(max_dice=5).max_dice == 5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DIE_SIR_LOG_LEVEL", "chatty"),
        ("DIE_SIR_MAX_DICE", "lots"),
        ("DIE_SIR_MAX_DICE", "0"),
        ("DIE_SIR_MAX_DICE", "-3"),
    ],
)
def test_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.max_dice = 3
