import json

import pytest

pytest.importorskip("tkinter")

import app  # noqa: E402
from conftest import make_record  # noqa: E402
from quiz_engine import DEFAULT_QUESTION_COUNT  # noqa: E402


def test_parser_defaults() -> None:
    args = app.build_parser().parse_args([])
    assert args.count == DEFAULT_QUESTION_COUNT
    assert args.seed is None
    assert args.pass_threshold == pytest.approx(70.0)
    assert args.log_level == "WARNING"
    assert args.bank.endswith("questions.json")


def test_parser_options() -> None:
    args = app.build_parser().parse_args(["--count", "5", "--seed", "3", "--pass-threshold", "80", "--log-level", "DEBUG"])
    assert (args.count, args.seed, args.pass_threshold, args.log_level) == (5, 3, 80.0, "DEBUG")


def test_main_reports_oversized_count(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        app.main(["--count", "500"])
    assert exc.value.code == 2
    assert "bank only has 52" in capsys.readouterr().err


def test_main_reports_incomplete_bank(tmp_path, capsys) -> None:
    raw = make_record(1)
    del raw["scenario"]
    path = tmp_path / "bank.json"
    path.write_text(json.dumps([raw]), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        app.main(["--bank", str(path), "--count", "1"])
    assert exc.value.code == 2
    assert "missing field 'scenario'" in capsys.readouterr().err
