import sys

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from cli.main import app
from core.domain.models import NO_FORTUNE_MESSAGE

runner = CliRunner()


@pytest.fixture
def dataset_env(monkeypatch, write_dataset):
    def use(payload):
        path = write_dataset(payload)
        monkeypatch.setenv("FORTUNE_COW_FORTUNES_PATH", str(path))
        return path

    return use


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_exits_zero(flag):
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert "--category" in result.stdout
    assert "Select fortunes by category" in result.stdout


@pytest.mark.parametrize("flag", ["--category", "-c"])
def test_category_flag_selects_matching_fortune(dataset_env, flag):
    dataset_env(
        {
            "fortunes": [
                {"text": "Alpha", "category": "wit"},
                {"text": "Bravo", "category": "motivational"},
            ]
        }
    )
    result = runner.invoke(app, [flag, "Motivational"])

    assert result.exit_code == 0
    assert "Bravo" in result.stdout
    assert "Alpha" not in result.stdout
    assert "(oo)" in result.stdout
    assert result.stdout.startswith("╭")


def test_no_match_is_not_a_failure(dataset_env):
    dataset_env({"fortunes": [{"text": "Alpha", "category": "wit"}]})
    result = runner.invoke(app, ["--category", "unknown"])

    assert result.exit_code == 0
    assert NO_FORTUNE_MESSAGE in result.stdout
    assert "(oo)" not in result.stdout


def test_without_category_prints_some_fortune():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "(oo)" in result.stdout


def test_border_and_character_come_from_settings(dataset_env, monkeypatch):
    dataset_env({"fortunes": [{"text": "Alpha"}]})
    monkeypatch.setenv("FORTUNE_COW_BORDER_STYLE", "ascii")
    monkeypatch.setenv("FORTUNE_COW_CHARACTER", "tux")
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout.startswith("+")
    assert "Alpha" in result.stdout
    assert "(oo)" not in result.stdout


def test_broken_dataset_exits_non_zero(dataset_env):
    dataset_env("{broken")
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Cannot load fortunes" in result.output


def test_empty_dataset_exits_non_zero(dataset_env):
    dataset_env({"fortunes": []})
    result = runner.invoke(app, [])
    assert result.exit_code == 1


def test_unknown_character_exits_non_zero(monkeypatch):
    monkeypatch.setenv("FORTUNE_COW_CHARACTER", "unicorn-of-doom")
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "unknown character" in result.output


def test_invalid_configuration_exits_non_zero(monkeypatch):
    monkeypatch.setenv("FORTUNE_COW_PADDING", "-4")
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_build_message_boxes_sentinel_without_cow(dataset_env):
    dataset_env({"fortunes": [{"text": "Alpha", "category": "wit"}]})
    message = cli_main.build_message(cli_main.AppSettings(), "humor")

    assert NO_FORTUNE_MESSAGE in message
    assert "(oo)" not in message


def test_non_utf8_dataset_exits_non_zero(monkeypatch, tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b"\xff\xfe")
    monkeypatch.setenv("FORTUNE_COW_FORTUNES_PATH", str(path))
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Cannot load fortunes" in result.output
    assert "not UTF-8" in result.output


def test_load_failure_is_reported_once(dataset_env):
    path = dataset_env("{broken")
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert result.output.count(path.name) == 1


def test_build_message_uses_injected_renderers(dataset_env, monkeypatch):
    dataset_env({"fortunes": [{"text": "Alpha", "category": "wit"}]})
    monkeypatch.setenv("FORTUNE_COW_BORDER_STYLE", "double")
    monkeypatch.setenv("FORTUNE_COW_PADDING", "2")
    calls = []

    def speak(text, character="cow"):
        calls.append(("speak", text, character))
        return f"<{text}>"

    def frame(text, *, padding=1, border_style="round"):
        calls.append(("frame", text, padding, border_style))
        return f"[{text}]"

    message = cli_main.build_message(cli_main.AppSettings(), "WIT", speak=speak, frame=frame)

    assert message == "[<Alpha>]"
    assert calls == [("speak", "Alpha", "cow"), ("frame", "<Alpha>", 2, "double")]


def test_run_entry_point(dataset_env, monkeypatch, capsys):
    dataset_env({"fortunes": [{"text": "Alpha", "category": "wit"}]})
    monkeypatch.setattr(sys, "argv", ["fortune-cow", "-c", "unknown"])

    with pytest.raises(SystemExit) as excinfo:
        cli_main.run()

    assert excinfo.value.code == 0
    assert NO_FORTUNE_MESSAGE in capsys.readouterr().out
