from __future__ import annotations

import csv
from pathlib import Path

import cv2
import numpy as np
import pytest

from tracematch.datasets import load_reference_dataset


def _write_gray(path: Path, value: int) -> None:
    cv2.imwrite(str(path), np.full((8, 8), value, dtype=np.uint8))


def test_discovers_images_labeled_by_stem(tmp_path: Path) -> None:
    root = tmp_path / "refs"
    root.mkdir()
    _write_gray(root / "unripe.png", 90)
    _write_gray(root / "healthy.png", 160)
    (root / "notes.txt").write_text("ignored", encoding="utf-8")

    dataset = load_reference_dataset(root)

    assert dataset.labels == ["healthy", "unripe"]
    assert dataset.root == root
    assert all(record.image_path.exists() for record in dataset.records)


def test_csv_controls_labels_and_order(tmp_path: Path) -> None:
    root = tmp_path / "refs"
    (root / "imgs").mkdir(parents=True)
    _write_gray(root / "imgs" / "a.png", 10)
    absolute = root / "imgs" / "b.png"
    _write_gray(absolute, 200)

    with (root / "references.csv").open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["label", "path"])
        writer.writerow(["Rotten (type B)", str(absolute)])
        writer.writerow(["Healthy", "imgs/a.png"])

    dataset = load_reference_dataset(root)

    assert dataset.labels == ["Rotten (type B)", "Healthy"]
    assert dataset.records[0].image_path == absolute
    assert dataset.records[1].image_path == root / "imgs" / "a.png"


def test_load_images_yields_rgba_pairs(tmp_path: Path) -> None:
    root = tmp_path / "refs"
    root.mkdir()
    _write_gray(root / "only.png", 42)

    pairs = list(load_reference_dataset(root).load_images())

    assert len(pairs) == 1
    label, image = pairs[0]
    assert label == "only"
    assert image.shape == (8, 8, 4)
    assert image[0, 0].tolist() == [42, 42, 42, 255]


def test_csv_with_missing_image_raises(tmp_path: Path) -> None:
    root = tmp_path / "refs"
    root.mkdir()
    (root / "references.csv").write_text("label,path\nA,nope.png\n", encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        load_reference_dataset(root)


def test_csv_requires_label_and_path_columns(tmp_path: Path) -> None:
    root = tmp_path / "refs"
    root.mkdir()
    (root / "references.csv").write_text("name,x\nA,1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_reference_dataset(root)


def test_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_reference_dataset(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_reference_dataset(tmp_path / "missing")
