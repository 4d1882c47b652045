"""Tests for the derive_plan command-line tool."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from cli.derive_plan import EXIT_INVALID_ANSWERS, EXIT_OK, EXIT_READ_ERROR, main, run


@pytest.fixture
def answers_file(tmp_path: Path, raw_answers: dict[str, Any]) -> Path:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(raw_answers), encoding="utf-8")
    return path


class TestDerivePlanCli:
    def test_prints_plan_json(self, answers_file: Path, capsys: pytest.CaptureFixture) -> None:
        assert main([str(answers_file)]) == EXIT_OK
        out = json.loads(capsys.readouterr().out)
        assert out["goal"] == "lose-weight"
        assert out["nutrition"]["dailyCalories"] == 2045
        assert len(out["mealSchedule"]) == 4

    def test_compact_indent(self, answers_file: Path, capsys: pytest.CaptureFixture) -> None:
        assert main([str(answers_file), "--indent", "0"]) == EXIT_OK
        assert capsys.readouterr().out.count("\n") == 1

    def test_reads_stdin(
        self,
        raw_answers: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(raw_answers)))
        assert run("-") == EXIT_OK
        assert json.loads(capsys.readouterr().out)["timeline"] == "2027-03-01"

    def test_invalid_answers(
        self, tmp_path: Path, raw_answers: dict[str, Any], capsys: pytest.CaptureFixture
    ) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**raw_answers, "email": "nope"}), encoding="utf-8")
        assert run(str(path)) == EXIT_INVALID_ANSWERS
        assert capsys.readouterr().out == ""

    def test_incomplete_answers(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"weight": 70}), encoding="utf-8")
        assert run(str(path)) == EXIT_INVALID_ANSWERS

    def test_missing_file(self, tmp_path: Path) -> None:
        assert run(str(tmp_path / "nope.json")) == EXIT_READ_ERROR

    def test_not_an_object(self, tmp_path: Path) -> None:
        """A JSON array is not an answer set."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert run(str(path)) == EXIT_READ_ERROR

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert run(str(path)) == EXIT_READ_ERROR
