from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

CLI_PATH = Path(__file__).resolve().parents[2] / "scripts" / "gsapforge.py"


def _load_cli() -> ModuleType:
    spec = importlib.util.spec_from_file_location("gsapforge_cli", CLI_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def cli() -> ModuleType:
    return _load_cli()


def test_build_arguments_merges_json_and_pairs(cli) -> None:
    arguments = cli.build_arguments(
        ["framework=vanilla", 'plugins=["Flip"]', "note=a=b"],
        json.dumps({"performance_level": "basic", "framework": "react"}),
    )
    assert arguments == {
        "framework": "vanilla",
        "plugins": ["Flip"],
        "note": "a=b",
        "performance_level": "basic",
    }


def test_build_arguments_rejects_bad_input(cli) -> None:
    with pytest.raises(ValueError):
        cli.build_arguments(["no-equals"], None)
    with pytest.raises(ValueError):
        cli.build_arguments([], "[1, 2]")


def test_tools_command_lists_every_tool(cli, capsys) -> None:
    assert cli.main(["tools"]) == 0
    out = capsys.readouterr().out
    assert "classify_and_generate" in out
    assert "request*" in out
    assert "generate_setup" in out


def test_call_in_process(cli, capsys) -> None:
    code = cli.main(["call", "lookup_reference", "--arg", "element_name=gsap.to"])
    assert code == 0
    assert "**Syntax**: `gsap.to(targets, vars)`" in capsys.readouterr().out


def test_call_error_exits_nonzero(cli, capsys) -> None:
    assert cli.main(["call", "classify_and_generate"]) == 1
    assert "Error" in capsys.readouterr().err
    assert cli.main(["call", "lookup_reference", "--json", "[]"]) == 2


def test_call_against_gateway_url(cli, monkeypatch, capsys) -> None:
    seen: dict = {}

    class FakeResponse:
        status_code = 200
        text = ""

        def json(self) -> dict:
            return {"tool": "build_pattern", "is_error": False, "text": "pattern body"}

    def fake_post(url, json=None, headers=None, timeout=None):  # noqa: A002
        seen.update(url=url, json=json, headers=headers)
        return FakeResponse()

    monkeypatch.setattr(cli.httpx, "post", fake_post)
    code = cli.main(
        [
            "call",
            "build_pattern",
            "--arg",
            "pattern_type=hero-section",
            "--url",
            "http://127.0.0.1:8010/",
            "--api-key",
            "k1",
        ]
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == "pattern body"
    assert seen["url"] == "http://127.0.0.1:8010/v1/tools/build_pattern"
    assert seen["json"] == {"arguments": {"pattern_type": "hero-section"}}
    assert seen["headers"] == {"x-api-key": "k1"}


def test_doctor_and_version(cli, monkeypatch, capsys) -> None:
    monkeypatch.setenv("GSAPFORGE_API_KEYS", "k1")
    monkeypatch.setenv("GSAPFORGE_LOG_LEVEL", "INFO")
    monkeypatch.delenv("GSAPFORGE_PORT", raising=False)
    assert cli.main(["doctor"]) == 0
    out = capsys.readouterr().out
    assert "GSAPFORGE_API_KEYS" in out
    assert "k1" not in out.replace("GSAPFORGE_API_KEYS", "")
    assert "config ok" in out

    assert cli.main(["version"]) == 0
    assert capsys.readouterr().out.startswith("GSAP Forge ")


def test_no_command_prints_help(cli) -> None:
    assert cli.main([]) == 2
