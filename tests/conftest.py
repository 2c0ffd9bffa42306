import json
from pathlib import Path

import pytest

from core.domain.models import FortuneCollection


@pytest.fixture
def two_fortunes() -> FortuneCollection:
    return FortuneCollection.model_validate(
        {
            "fortunes": [
                {"text": "A", "category": "wit"},
                {"text": "B", "category": "motivational"},
            ]
        }
    )


@pytest.fixture
def mixed_fortunes() -> FortuneCollection:
    return FortuneCollection.model_validate(
        {
            "fortunes": [
                {"text": "m1", "category": "Motivational"},
                {"text": "w1", "category": "wit"},
                {"text": "m2", "category": "motivational"},
                {"text": "plain"},
                {"text": "m3", "category": "MOTIVATIONAL"},
            ]
        }
    )


@pytest.fixture
def fixed_picker():
    def make(index: int):
        calls: list[int] = []

        def pick(count: int) -> int:
            calls.append(count)
            return index

        pick.calls = calls
        return pick

    return make


@pytest.fixture
def write_dataset(tmp_path: Path):
    def write(payload, name: str = "fortunes.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return write


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path: Path):
    for name in ("FORTUNES_PATH", "CHARACTER", "BORDER_STYLE", "PADDING", "LOG_LEVEL"):
        monkeypatch.delenv(f"FORTUNE_COW_{name}", raising=False)
    # Keep developer .env files out of the tests.
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
