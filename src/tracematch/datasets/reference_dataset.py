from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

import numpy as np

from ..io import load_rgba

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".bmp", ".webp", ".tif", ".tiff")


@dataclass(slots=True)
class ReferenceRecord:
    """
    A single labeled reference image.
    """

    label: str
    image_path: Path


@dataclass(slots=True)
class ReferenceDataset:
    """
    Ordered reference images found under a directory.
    """

    records: List[ReferenceRecord]
    root: Path

    @property
    def labels(self) -> List[str]:
        return [record.label for record in self.records]

    def load_images(self) -> Iterator[Tuple[str, np.ndarray]]:
        """
        Yield ``(label, rgba)`` pairs in record order.
        """
        for record in self.records:
            yield record.label, load_rgba(record.image_path)


def load_reference_dataset(
    root: Path | str,
    csv_name: str = "references.csv",
) -> ReferenceDataset:
    """
    Collect labeled reference images.

    When ``root/<csv_name>`` exists it lists ``label,path`` rows; otherwise
    every image directly under ``root`` is used, labeled by its file stem:
        root/
            healthy.png
            unripe.png
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"Reference directory not found: {root_path}")

    csv_path = root_path / csv_name
    if csv_path.exists():
        records = _load_records(csv_path, root_path)
    else:
        records = _discover_records(root_path)

    if not records:
        raise ValueError(f"No reference images found in {root_path}")

    return ReferenceDataset(records=records, root=root_path)


def _discover_records(root: Path) -> List[ReferenceRecord]:
    candidates = sorted(
        path for path in root.iterdir() if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )
    return [ReferenceRecord(label=path.stem, image_path=path) for path in candidates]


def _load_records(csv_path: Path, root: Path) -> List[ReferenceRecord]:
    records: List[ReferenceRecord] = []
    with csv_path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is None:
            raise ValueError("CSV file must include a header row.")
        if "label" not in reader.fieldnames or "path" not in reader.fieldnames:
            raise ValueError("CSV header must contain 'label' and 'path' columns.")

        for row in reader:
            label = (row.get("label") or "").strip()
            raw_path = (row.get("path") or "").strip()
            if not label or not raw_path:
                raise ValueError(f"Row missing label or path: {row}")

            image_path = Path(raw_path)
            if not image_path.is_absolute():
                image_path = root / image_path
            if not image_path.exists():
                raise FileNotFoundError(f"Image referenced in CSV missing: {image_path}")

            records.append(ReferenceRecord(label=label, image_path=image_path))

    return records


__all__ = ["ReferenceDataset", "ReferenceRecord", "load_reference_dataset"]
