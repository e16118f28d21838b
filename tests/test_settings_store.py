import json
import os
import stat
from pathlib import Path

import pytest

from modix.config import AppConfig, load_env_file
from modix.constant import get_working_dir
from modix.errors import ConfigIOError, ConfigParseError, ConfigValidationError
from modix.vendors import SettingsStore, VendorConfig, get_claude_store

_TIMESTAMPS = {"created_at", "updated_at"}


def test_missing_file_yields_seeded_default(app):
    store = SettingsStore(app)
    data = store.load()
    assert data.current_vendor == "anthropic"
    assert "deepseek" in data.vendors
    assert not store.path.exists()


def test_blank_file_yields_seeded_default(app):
    app.settings_path.write_text("  \n", encoding="utf-8")
    data = SettingsStore(app).load()
    assert data.default_model == "Claude"


def test_roundtrip_save_load(app, small_config):
    store = SettingsStore(app)
    small_config.set_current("acme", "acme-small")
    store.save(small_config)

    loaded = store.load()
    assert loaded.model_dump(exclude=_TIMESTAMPS) == small_config.model_dump(
        exclude=_TIMESTAMPS,
    )


def test_save_stamps_timestamps(app, small_config):
    store = SettingsStore(app)
    store.save(small_config)
    first = store.load()
    assert first.created_at is not None
    assert first.updated_at is not None

    store.save(first)
    second = store.load()
    assert second.created_at == first.created_at
    assert second.updated_at >= first.updated_at


def test_saved_file_is_plain_json(app, small_config):
    SettingsStore(app).save(small_config)
    raw = json.loads(app.settings_path.read_text(encoding="utf-8"))
    assert raw["current_vendor"] == "base"
    assert raw["vendors"]["acme"]["api_endpoint"] == "https://api.acme.test/v1"
    assert raw["config_version"] == "1.0.0"


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_saved_file_is_owner_only(app, small_config):
    SettingsStore(app).save(small_config)
    mode = stat.S_IMODE(app.settings_path.stat().st_mode)
    assert mode == 0o600


def test_malformed_json_is_parse_error(app):
    app.settings_path.write_text("{not valid json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        SettingsStore(app).load()


def test_non_object_json_is_parse_error(app):
    app.settings_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        SettingsStore(app).load()


def test_wrong_shape_is_parse_error(app):
    app.settings_path.write_text(
        json.dumps({"vendors": "not-a-mapping"}),
        encoding="utf-8",
    )
    with pytest.raises(ConfigParseError):
        SettingsStore(app).load()


def test_invalid_store_is_validation_error(app):
    app.settings_path.write_text(
        json.dumps(
            {
                "current_vendor": "ghost",
                "current_model": "m",
                "default_vendor": "v",
                "default_model": "m",
                "vendors": {"v": {"models": ["m"]}},
            },
        ),
        encoding="utf-8",
    )
    with pytest.raises(ConfigValidationError, match="ghost"):
        SettingsStore(app).load()


def test_save_refuses_invalid_store(app, small_config):
    small_config.current_vendor = "ghost"
    with pytest.raises(ConfigValidationError):
        SettingsStore(app).save(small_config)
    assert not app.settings_path.exists()


def test_save_under_regular_file_is_io_error(tmp_path: Path, small_config):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    app = AppConfig.for_dir(blocker)

    with pytest.raises(ConfigIOError, match="failed to write configuration"):
        SettingsStore(app).save(small_config)


def test_claude_save_under_regular_file_is_io_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    app = AppConfig.for_dir(tmp_path, claude_settings_path=blocker / "s.json")

    with pytest.raises(ConfigIOError):
        get_claude_store(app).save({"env": {}})


def test_reset_overwrites_with_seed(app, small_config):
    store = SettingsStore(app)
    store.save(small_config)
    data = store.reset()
    assert "acme" not in data.vendors
    assert "acme" not in store.load().vendors


def test_custom_seed_vendors(tmp_path: Path):
    app = AppConfig.for_dir(
        tmp_path,
        seed_vendors={"local": VendorConfig(company="Me", models=["llama"])},
        default_vendor="local",
        default_model="llama",
    )
    data = SettingsStore(app).load()
    assert list(data.vendors) == ["local"]
    assert data.current_model == "llama"


def test_app_config_from_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("MODIX_WORKING_DIR", str(tmp_path / "wd"))
    monkeypatch.setenv("MODIX_CLAUDE_SETTINGS", str(tmp_path / "claude.json"))
    monkeypatch.setenv("MODIX_LOG_LEVEL", "debug")

    app = AppConfig.from_env()
    assert app.working_dir == (tmp_path / "wd").resolve()
    assert app.settings_path == (tmp_path / "wd").resolve() / "settings.json"
    assert app.claude_settings_path == (tmp_path / "claude.json").resolve()
    assert app.log_level == "DEBUG"


def test_load_env_file(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MODIX_TEST_VALUE", raising=False)
    assert not load_env_file(tmp_path)

    (tmp_path / ".env").write_text("MODIX_TEST_VALUE=hello\n", encoding="utf-8")
    assert load_env_file(tmp_path)
    assert os.environ["MODIX_TEST_VALUE"] == "hello"


def test_working_dir_defaults_to_home(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MODIX_WORKING_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setattr("sys.platform", "linux")
    assert get_working_dir() == tmp_path / ".modix"


def test_working_dir_uses_appdata_on_windows(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MODIX_WORKING_DIR", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
    monkeypatch.setattr("sys.platform", "win32")
    assert get_working_dir() == tmp_path / "Roaming" / "modix"


def test_working_dir_env_overrides_appdata(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("MODIX_WORKING_DIR", str(tmp_path / "wd"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
    monkeypatch.setattr("sys.platform", "win32")
    assert get_working_dir() == (tmp_path / "wd").resolve()
