import pytest

from dumper import DumpConfig
from postprocess import DEFAULT_FORMATTER_COMMAND


def test_defaults():
    config = DumpConfig()
    assert config.enabled is False
    assert config.formatted is True
    assert config.notification is True
    assert config.formatter_command == DEFAULT_FORMATTER_COMMAND


def test_enable_keeps_other_toggles():
    config = DumpConfig(formatted=False).enable()
    assert config.enabled is True
    assert config.formatted is False


def test_empty_environment_disables():
    assert DumpConfig.from_env({}) == DumpConfig()


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_switch_enables(value: str):
    config = DumpConfig.from_env({"CODEDUMP": value})
    assert config.enabled is True
    assert config.formatted is True


@pytest.mark.parametrize("value", ["0", "off", "maybe", ""])
def test_other_switch_values_disable(value: str):
    assert DumpConfig.from_env({"CODEDUMP": value}).enabled is False


def test_messy_skips_formatting():
    config = DumpConfig.from_env({"CODEDUMP": "messy"})
    assert config.enabled is True
    assert config.formatted is False
    assert config.notification is True


def test_overrides():
    config = DumpConfig.from_env(
        {
            "CODEDUMP": "1",
            "CODEDUMP_FORMATTED": "no",
            "CODEDUMP_NOTIFICATION": "0",
            "CODEDUMP_FORMATTER": "ruff format --quiet",
        }
    )
    assert config.formatted is False
    assert config.notification is False
    assert config.formatter_command == ("ruff", "format", "--quiet")


def test_malformed_flag_keeps_default(caplog):
    with caplog.at_level("WARNING", logger="dumper.config"):
        config = DumpConfig.from_env(
            {"CODEDUMP": "messy", "CODEDUMP_FORMATTED": "sometimes", "CODEDUMP_NOTIFICATION": "loud"}
        )
    assert config.enabled is True
    assert config.formatted is False
    assert config.notification is True
    assert "CODEDUMP_FORMATTED" in caplog.text
    assert "CODEDUMP_NOTIFICATION" in caplog.text


def test_unbalanced_formatter_quote_keeps_default(caplog):
    with caplog.at_level("WARNING", logger="dumper.config"):
        config = DumpConfig.from_env({"CODEDUMP": "1", "CODEDUMP_FORMATTER": "black '--quiet"})
    assert config.formatter_command == DEFAULT_FORMATTER_COMMAND
    assert "CODEDUMP_FORMATTER" in caplog.text


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CODEDUMP", "1")
    monkeypatch.delenv("CODEDUMP_FORMATTED", raising=False)
    monkeypatch.delenv("CODEDUMP_NOTIFICATION", raising=False)
    monkeypatch.delenv("CODEDUMP_FORMATTER", raising=False)
    assert DumpConfig.from_env() == DumpConfig(enabled=True)


def test_disabled_switch_ignores_malformed_overrides():
    config = DumpConfig.from_env({"CODEDUMP_FORMATTED": "sometimes"})
    assert config == DumpConfig()
