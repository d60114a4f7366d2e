import logging
from datetime import timedelta

from capi_test_infra.test_infra.utils import DurationEnvVar, EnvVar, is_true


def test_env_var_takes_first_set_key(monkeypatch):
    monkeypatch.setenv("CAPI_SECOND", "second")
    var = EnvVar(["CAPI_FIRST", "CAPI_SECOND"], default="default")
    assert var.value == "second"
    assert var.is_user_set

    monkeypatch.setenv("CAPI_FIRST", "first")
    assert var.value == "first"


def test_env_var_default_and_loader(monkeypatch):
    monkeypatch.delenv("CAPI_FLAG", raising=False)
    var = EnvVar(["CAPI_FLAG"], loader=is_true, default=False)
    assert var.value is False
    assert not var.is_user_set

    monkeypatch.setenv("CAPI_FLAG", "true")
    assert var.value is True
    monkeypatch.setenv("CAPI_FLAG", "yes")
    assert var.value is False
    assert str(var) == "CAPI_FLAG=False"


def test_duration_env_var_parses_value(monkeypatch):
    monkeypatch.setenv("CAPI_TIMEOUT", "2h30m")
    var = DurationEnvVar(["CAPI_TIMEOUT"], default=timedelta(minutes=60))
    assert var.value == timedelta(hours=2, minutes=30)
    assert not var.is_fallback


def test_duration_env_var_invalid_value_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("CAPI_TIMEOUT", "45")
    var = DurationEnvVar(["CAPI_TIMEOUT"], default=timedelta(minutes=60))

    with caplog.at_level(logging.WARNING):
        assert var.value == timedelta(minutes=60)

    assert var.is_fallback
    assert "CAPI_TIMEOUT" in caplog.text
    assert "'45'" in caplog.text


def test_duration_env_var_empty_value_is_default_without_warning(monkeypatch, caplog):
    monkeypatch.setenv("CAPI_TIMEOUT", "")
    var = DurationEnvVar(["CAPI_TIMEOUT"], default=timedelta(minutes=10))

    with caplog.at_level(logging.WARNING):
        assert var.value == timedelta(minutes=10)

    assert not var.is_fallback
    assert "CAPI_TIMEOUT" not in caplog.text
