"""
CLI tests.

Most cases call main(argv) directly; one smoke test runs the module as a
subprocess from the repository root.
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

from pairnum import config
from pairnum.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path, lines):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


class TestSum:
    def test_text_output(self, tmp_path, capsys):
        path = _write(tmp_path, ["[1,1]", "[2,2]", "[3,3]", "[4,4]"])
        assert main(["sum", path]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Final tree is [[[[1,1],[2,2]],[3,3]],[4,4]]",
            "Its magnitude is 445",
        ]

    def test_json_output(self, homework_file, capsys):
        assert main(["sum", str(homework_file), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["schema"] == "pairnum-sum.v1"
        assert payload["magnitude"] == 4140

    def test_missing_file(self, tmp_path, capsys):
        assert main(["sum", str(tmp_path / "nope.txt")]) == 1
        assert "pairnum:" in capsys.readouterr().err

    def test_empty_file(self, tmp_path, capsys):
        assert main(["sum", _write(tmp_path, [""])]) == 1
        assert "did not contain any trees" in capsys.readouterr().err

    def test_malformed_line(self, tmp_path, capsys):
        assert main(["sum", _write(tmp_path, ["[1,2]", "[1,x]"])]) == 1
        assert "invalid character" in capsys.readouterr().err


class TestMax:
    def test_text_output(self, homework_file, capsys):
        assert main(["max", str(homework_file)]) == 0
        assert capsys.readouterr().out.strip() == "The greatest magnitude is 3993"

    def test_json_output(self, tmp_path, capsys):
        assert main(["max", _write(tmp_path, ["[1,2]", "[3,4]"]), "--json", "--pretty"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"schema": "pairnum-max.v1", "magnitude": 65}


class TestReduce:
    def test_single_literal(self, capsys):
        assert main(["reduce", "[[[[[9,8],1],2],3],4]"]) == 0
        assert capsys.readouterr().out.strip() == "[[[[0,9],2],3],4]"

    def test_add_literals(self, capsys):
        assert main(["reduce", "[[[[4,3],4],4],[7,[[8,4],9]]]", "[1,1]"]) == 0
        assert capsys.readouterr().out.strip() == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"

    def test_trace_lines(self, capsys):
        assert main(["reduce", "[[[[4,3],4],4],[7,[[8,4],9]]]", "[1,1]", "--trace"]) == 0
        events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert len(events) == 6
        assert events[1]["mu"] == "[[[[0,7],4],[15,[0,13]]],[1,1]]"
        assert events[-1]["type"] == "reduction.normal"

    def test_json_output(self, capsys):
        assert main(["reduce", "[1,1]", "[2,2]", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"schema": "pairnum-reduce.v1", "tree": "[[1,1],[2,2]]", "magnitude": 35}

    def test_no_trace_overrides_env_default(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "TRACE_ENABLED", True)
        assert main(["reduce", "[[[[[9,8],1],2],3],4]", "--no-trace"]) == 0
        assert capsys.readouterr().out.strip() == "[[[[0,9],2],3],4]"

    def test_env_default_traces(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "TRACE_ENABLED", True)
        assert main(["reduce", "[[[[[9,8],1],2],3],4]"]) == 0
        events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [e["type"] for e in events] == ["reduction.explode", "reduction.normal"]

    def test_json_wins_over_env_default(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "TRACE_ENABLED", True)
        assert main(["reduce", "[1,1]", "[2,2]", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["schema"] == "pairnum-reduce.v1"

    def test_trace_and_json_are_exclusive(self, capsys):
        assert main(["reduce", "[1,1]", "--trace", "--json"]) == 2
        assert "not allowed with" in capsys.readouterr().err

    def test_malformed_literal(self, capsys):
        assert main(["reduce", "[1,2"]) == 1
        assert "unterminated" in capsys.readouterr().err


class TestMagnitude:
    def test_magnitude(self, capsys):
        assert main(["magnitude", "[9,1]"]) == 0
        assert capsys.readouterr().out.strip() == "29"


class TestUsage:
    def test_no_command_is_usage_error(self, capsys):
        assert main([]) == 2

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "pairnum" in capsys.readouterr().out


def test_module_smoke():
    result = subprocess.run(
        [sys.executable, "-m", "pairnum.cli", "magnitude", "[[1,2],[[3,4],5]]"],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "143"
