from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from common.config import VariantSettings
from variants import bootstrap
from variants import main as cli


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("VARIANT"):
            monkeypatch.delenv(name, raising=False)

    def _defaults(*args: Any, **kwargs: Any) -> VariantSettings:
        return VariantSettings()

    monkeypatch.setattr(cli, "load_settings", _defaults)
    monkeypatch.setattr(bootstrap, "load_settings", _defaults)


def test_groups_lists_registered_ids(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["groups"]) == 0
    assert capsys.readouterr().out.strip() == "home"


def test_show_defaults_as_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "home"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[home]",
        "home_button_color = #0000FF",
        "image = False",
        "home_headline = Welcome",
    ]


def test_show_with_file_and_overrides_as_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assignments = tmp_path / "variants.yaml"
    assignments.write_text('home_button_color: "#FF0000"\nhome_headline: From file\n', encoding="utf-8")
    code = cli.main(
        [
            "show",
            "home",
            "--file",
            str(assignments),
            "--set",
            "image=true",
            "--set",
            "home_headline=Override",
            "--json",
        ]
    )
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "group": "home",
        "variants": {
            "home_button_color": "#FF0000",
            "image": True,
            "home_headline": "Override",
        },
    }


def test_set_keeps_hash_values_literal(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "home", "--set", "home_button_color=#00FF00", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["variants"]["home_button_color"] == "#00FF00"


def test_unknown_group_exits_with_2(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "checkout"]) == 2
    assert "checkout" in capsys.readouterr().err


def test_unreadable_file_exits_with_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "home", "--file", str(tmp_path / "absent.yaml")]) == 1
    assert "error" in capsys.readouterr().err


def test_malformed_set_is_rejected() -> None:
    with pytest.raises(SystemExit):
        cli.main(["show", "home", "--set", "no-equals-sign"])


def test_set_values_are_converted_per_variant_type(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        ["show", "home", "--set", "home_headline=2024", "--set", "image=Yes", "--set", "home_button_color=112233", "--json"]
    )
    assert code == 0
    variants = json.loads(capsys.readouterr().out)["variants"]
    assert variants == {"home_button_color": "#112233", "image": True, "home_headline": "2024"}
