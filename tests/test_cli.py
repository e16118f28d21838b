import pytest
from click.testing import CliRunner

from modix import __version__
from modix.config import AppConfig
from modix.cli import cli
from modix.vendors import SettingsStore, get_claude_store


@pytest.fixture
def run(app):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, list(args), obj=app)

    return _run


def _add_x(run):
    return run(
        "add",
        "X",
        "-c",
        "VCorp",
        "-v",
        "v",
        "-u",
        "https://api.v.test",
        "-k",
        "sk-v-secret-key",
    )


def test_version(run):
    result = run("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_init_then_list(run, app):
    result = run("init")
    assert result.exit_code == 0, result.output
    assert "Initialized default configuration" in result.output
    assert app.settings_path.is_file()

    result = run("init")
    assert result.exit_code == 0
    assert "already exists" in result.output

    result = run("list")
    assert result.exit_code == 0, result.output
    assert "deepseek-chat" in result.output
    assert "anthropic@Claude" in result.output


def test_add_and_switch(run, app):
    result = _add_x(run)
    assert result.exit_code == 0, result.output
    assert "Created new vendor 'v'" in result.output

    result = run("switch", "X")
    assert result.exit_code == 0, result.output
    assert "Switched to model: X" in result.output

    env = get_claude_store(app).load()["env"]
    assert env["ANTHROPIC_BASE_URL"] == "https://api.v.test"

    result = run("status")
    assert result.exit_code == 0
    assert "VCorp" in result.output
    assert "v@X" in result.output


def test_add_duplicate_fails(run):
    assert _add_x(run).exit_code == 0
    result = _add_x(run)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "already exists" in result.output


def test_add_requires_flags(run):
    result = run("add", "X", "-v", "v")
    assert result.exit_code != 0


def test_switch_unknown_model_fails(run):
    result = run("switch", "ghost")
    assert result.exit_code == 1
    assert "model 'ghost' not found" in result.output


def test_remove_reports_prune_and_reset(run, app):
    _add_x(run)
    run("switch", "X")

    result = run("remove", "X")
    assert result.exit_code == 0, result.output
    assert "had no remaining models" in result.output
    assert "Switched to default: Claude@anthropic" in result.output
    assert "v" not in SettingsStore(app).load().vendors


def test_show_masks_key_unless_asked(run):
    _add_x(run)
    result = run("show", "v")
    assert result.exit_code == 0
    assert "sk-v-secret-key" not in result.output
    assert "-key" in result.output

    result = run("show", "v", "--include-key")
    assert "sk-v-secret-key" in result.output


def test_show_unknown_vendor(run):
    result = run("show", "ghost")
    assert result.exit_code == 1
    assert "vendor 'ghost' not found" in result.output


def test_update(run, app):
    result = run("update", "deepseek")
    assert result.exit_code == 0
    assert "No updates were specified" in result.output

    result = run("update", "deepseek", "-k", "sk-ds", "-m", "deepseek-v4")
    assert result.exit_code == 0, result.output
    assert "Added model: deepseek-v4" in result.output
    vendor = SettingsStore(app).load().vendors["deepseek"]
    assert vendor.api_key == "sk-ds"
    assert "deepseek-v4" in vendor.models


def test_path(run, app):
    result = run("path")
    assert result.exit_code == 0
    assert str(app.settings_path) in result.output
    assert str(app.claude_settings_path) in result.output


def test_check_claude_code(run):
    _add_x(run)
    result = run("check", "claude-code")
    assert result.exit_code == 0, result.output
    assert "anthropic@Claude" in result.output

    run("switch", "X")
    result = run("check", "claude-code")
    assert result.exit_code == 0, result.output
    assert "v@X" in result.output
    assert "modix switch" not in result.output


def test_check_modix_before_init(run):
    result = run("check", "modix")
    assert result.exit_code == 0, result.output
    assert "Configuration file not found" in result.output
    assert "modix init" in result.output


def test_check_modix_reports_health(run):
    run("init")
    _add_x(run)
    result = run("check", "modix")
    assert result.exit_code == 0, result.output
    assert '"current_vendor": "anthropic"' in result.output
    assert "sk-v-secret-key" not in result.output
    assert "v@X" not in result.output
    assert "anthropic@Claude" in result.output
    assert "Vendor 'deepseek' has empty API key" in result.output
    assert "Vendor 'v'" not in result.output
    assert "Vendor 'anthropic'" not in result.output


def test_check_unknown_tool(run):
    result = run("check", "emacs")
    assert result.exit_code == 1
    assert "unknown tool: emacs" in result.output


def test_corrupt_settings_is_reported(run, app):
    app.settings_path.write_text("{broken", encoding="utf-8")
    result = run("list")
    assert result.exit_code == 1
    assert "failed to parse configuration JSON" in result.output


def test_unwritable_settings_dir_is_reported(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    app = AppConfig.for_dir(blocker)

    result = CliRunner().invoke(cli, ["init"], obj=app)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "failed to write configuration file" in result.output
