import json
import logging

import pytest

from cronograma.exceptions import ConfigError
from cronograma.infrastructure.config.settings import Settings

ENV_VARS = (
    "CRONOGRAMA_DEBUG",
    "CRONOGRAMA_LOG_LEVEL",
    "CRONOGRAMA_CASHIER_JOB_TITLE",
    "CRONOGRAMA_PERIOD_START_DAY",
    "CRONOGRAMA_PERIOD_END_DAY",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Settings()

    assert config.get_period_bounds() == (21, 20)
    assert config.get_cashier_job_title() == "CAJERO DE RECAUDO"
    assert config.get_default_conditioning() == {"morning": 4, "afternoon": 4, "night": 2, "is_automatic": False}
    assert config.get_attendance_config()["absence_probability"] == 0.03
    assert config.get_log_level() == logging.INFO
    assert not config.is_debug_enabled()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CRONOGRAMA_PERIOD_START_DAY", "16")
    monkeypatch.setenv("CRONOGRAMA_PERIOD_END_DAY", "15")
    monkeypatch.setenv("CRONOGRAMA_CASHIER_JOB_TITLE", "CAJERO")
    monkeypatch.setenv("CRONOGRAMA_DEBUG", "yes")

    config = Settings()

    assert config.get_period_bounds() == (16, 15)
    assert config.get_cashier_job_title() == "CAJERO"
    assert config.get_log_level() == logging.DEBUG


def test_non_numeric_environment_value(monkeypatch):
    monkeypatch.setenv("CRONOGRAMA_PERIOD_START_DAY", "veintiuno")
    with pytest.raises(ConfigError):
        Settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CRONOGRAMA_LOG_LEVEL", "VERBOSE")
    with pytest.raises(ConfigError, match="Nivel de log"):
        Settings()


def test_json_file_is_deep_merged(tmp_path):
    config_file = tmp_path / "cronograma.json"
    config_file.write_text(json.dumps({
        "schedule": {"default_conditioning": {"night": 3}},
        "attendance": {"absence_probability": 0.1},
    }), encoding="utf-8")

    config = Settings(str(config_file))

    assert config.get_default_conditioning() == {"morning": 4, "afternoon": 4, "night": 3, "is_automatic": False}
    assert config.get_attendance_config()["absence_probability"] == 0.1
    assert config.get_attendance_config()["forgot_clock_out_probability"] == 0.05


def test_missing_file_keeps_defaults(tmp_path):
    config = Settings(str(tmp_path / "no_existe.json"))
    assert config.get_period_bounds() == (21, 20)


def test_malformed_file(tmp_path):
    config_file = tmp_path / "roto.json"
    config_file.write_text("{schedule:", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings(str(config_file))


def test_out_of_range_values_are_rejected(tmp_path):
    config_file = tmp_path / "cronograma.json"
    config_file.write_text(json.dumps({
        "schedule": {"period_end_day": 31, "staffing_factor": 0.5},
    }), encoding="utf-8")

    with pytest.raises(ConfigError) as error:
        Settings(str(config_file))

    assert "period_end_day" in str(error.value)
    assert "factor de cobertura" in str(error.value)


def test_get_and_update_setting():
    config = Settings()

    config.update_setting("schedule.default_conditioning.morning", 6)

    assert config.get_setting("schedule.default_conditioning.morning") == 6
    assert config.get_setting("schedule.no_existe", "x") == "x"
    assert config.get_setting("schedule.cashier_job_title.extra") is None


def test_defaults_are_not_shared_between_instances():
    first = Settings()
    first.update_setting("schedule.default_conditioning.night", 9)
    assert Settings().get_default_conditioning()["night"] == 2

