from __future__ import annotations

import importlib.util
from pathlib import Path

import cv2
import numpy as np
import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "classify_image.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("classify_image", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def _write_gray(path: Path, value: int) -> None:
    cv2.imwrite(str(path), np.full((20, 20), value, dtype=np.uint8))


def test_script_prints_report_for_each_query(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    refs = tmp_path / "refs"
    refs.mkdir()
    _write_gray(refs / "dark.png", 20)
    _write_gray(refs / "light.png", 230)
    first = tmp_path / "q1.png"
    second = tmp_path / "q2.png"
    _write_gray(first, 180)
    _write_gray(second, 0)

    script = _load_script()
    exit_code = script.run([str(first), str(second), "--references", str(refs), "--side", "8"])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert f"== {first}" in output
    assert output.count("--- TRACE INNER PRODUCT REPORT ---") == 2
    reports = output.split("== ")
    assert "WINNER: light" in reports[1]
    assert "WINNER: dark" in reports[2]


def test_script_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = _load_script()

    exit_code = script.run([str(tmp_path / "q.png"), "--references", str(tmp_path / "missing")])

    assert exit_code == 1
    assert "Reference directory not found" in capsys.readouterr().err
