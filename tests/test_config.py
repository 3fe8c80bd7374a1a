import logging
from pathlib import Path

import pytest

from py_dimensional import (LiteralPolicy, PreferredUnits, Settings, Unit, basicConfig, disable_file_logging,
                            enable_file_logging, loadImperialUnits, loadMetricUnits, logger)


class TestConfigLoader:

    @pytest.mark.parametrize(
        "test_name, config_func, expected_length, expected_angle",
        [
            ("env", basicConfig, Unit.Meters, Unit.Radians),
            ("manual", lambda: basicConfig(preferred_units={'length': Unit.Inches}), Unit.Inches, Unit.Radians),
            ("imperial", loadImperialUnits, Unit.Feet, Unit.Degrees),
            ("metric", loadMetricUnits, Unit.Meters, Unit.Radians),
        ],
    )
    def test_preferred_units_load(self, test_name, config_func, expected_length, expected_angle):
        config_func()
        assert PreferredUnits.length == expected_length
        assert PreferredUnits.angle == expected_angle

    def test_imperial_then_metric(self):
        loadImperialUnits()
        assert PreferredUnits.mass == Unit.Pounds
        loadMetricUnits()
        assert PreferredUnits.mass == Unit.Kilograms

    def test_settings_mapping(self):
        basicConfig(settings={'literal_policy': 'adopt', 'merge_deferred': False})
        assert Settings.LITERAL_POLICY is LiteralPolicy.Adopt
        assert Settings.MERGE_DEFERRED is False

    def test_mutual_exclusion_error(self):
        with pytest.raises(ValueError):
            basicConfig(filename="dummy.toml", preferred_units={'length': Unit.Meters})
        with pytest.raises(ValueError):
            basicConfig(filename="dummy.toml", settings={'merge_deferred': False})

    def test_load_from_file(self, tmp_path: Path):
        cfg = tmp_path / "custom.toml"
        cfg.write_text("""
[pydim.preferred_units]
length = "yards"
time = "minutes"

[pydim.settings]
literal_policy = "adopt"
""".strip())
        basicConfig(str(cfg))
        assert PreferredUnits.length == Unit.Yards
        assert PreferredUnits.time == Unit.Minutes
        assert Settings.LITERAL_POLICY is LiteralPolicy.Adopt

    def test_load_config_searches_upwards(self, monkeypatch, tmp_path: Path):
        # pydim.toml in tmp/a, loader runs from tmp/a/b
        a = tmp_path / "a"
        b = a / "b"
        b.mkdir(parents=True)
        (a / "pydim.toml").write_text("""
[pydim.preferred_units]
length = "miles"
""".strip())

        with monkeypatch.context() as m:
            m.chdir(str(b))
            basicConfig()
            assert PreferredUnits.length == Unit.Miles

    def test_hidden_config_name(self, monkeypatch, tmp_path: Path):
        (tmp_path / ".pydim.toml").write_text("""
[pydim.settings]
merge_deferred = false
""".strip())

        with monkeypatch.context() as m:
            m.chdir(str(tmp_path))
            basicConfig()
            assert Settings.MERGE_DEFERRED is False

    @pytest.mark.parametrize(
        "content, message",
        [
            ("[other]\nkey = 1", "no `pydim` section"),
            ("[pydim]\nversion = 1", "no `pydim.preferred_units` or `pydim.settings`"),
        ],
        ids=["no_section", "empty_section"]
    )
    def test_config_warnings(self, tmp_path: Path, caplog, content, message):
        cfg = tmp_path / "pydim.toml"
        cfg.write_text(content)
        basicConfig(str(cfg))
        assert message in caplog.text
        assert PreferredUnits.length == Unit.Meters

    def test_config_warnings_suppressed(self, tmp_path: Path, caplog):
        cfg = tmp_path / "pydim.toml"
        cfg.write_text("[other]\nkey = 1")
        basicConfig(str(cfg), suppress_warnings=True)
        assert "section" not in caplog.text


class TestSettings:

    def test_defaults(self):
        assert Settings.LITERAL_POLICY is LiteralPolicy.Reject
        assert Settings.MERGE_DEFERRED is True

    def test_set_and_restore(self):
        Settings.set(literal_policy=LiteralPolicy.Adopt, merge_deferred=False)
        assert Settings.LITERAL_POLICY is LiteralPolicy.Adopt
        assert Settings.MERGE_DEFERRED is False
        Settings.restore_defaults()
        assert Settings.LITERAL_POLICY is LiteralPolicy.Reject
        assert Settings.MERGE_DEFERRED is True

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({'literal_policy': 'ignore'}, "is not a literal policy"),
            ({'merge_deferred': 'yes'}, "merge_deferred expects a bool"),
            ({'strict': True}, "not found in settings"),
        ],
        ids=["bad_policy", "bad_merge", "unknown"]
    )
    def test_set_invalid_warns(self, kwargs, message, caplog):
        Settings.set(**kwargs)
        assert message in caplog.text
        assert Settings.LITERAL_POLICY is LiteralPolicy.Reject
        assert Settings.MERGE_DEFERRED is True


class TestLogger:

    def test_file_logging(self, tmp_path: Path):
        logfile = tmp_path / "py_dim.log"
        enable_file_logging(str(logfile))
        logger.debug("hello file")
        disable_file_logging()
        assert logfile.exists()
        assert "hello file" in logfile.read_text()

    def test_file_logging_replaced(self, tmp_path: Path):
        first, second = tmp_path / "first.log", tmp_path / "second.log"
        enable_file_logging(str(first))
        enable_file_logging(str(second))
        logger.warning("to second")
        disable_file_logging()
        assert "to second" not in first.read_text()
        assert "to second" in second.read_text()

    def test_disable_without_enable(self):
        disable_file_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
