from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from tracematch.datasets import load_reference_dataset
from tracematch.io import load_rgba
from tracematch.matching import (
    DEFAULT_SIDE,
    Rasterizer,
    build_reference_set,
    classify,
    format_report,
)
from tracematch.matching.report import LOCALE_SEPARATORS

logger = logging.getLogger("tracematch.cli")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Classify images against labeled references using the trace inner product."
    )
    parser.add_argument(
        "query",
        type=Path,
        nargs="+",
        help="Image file(s) to classify.",
    )
    parser.add_argument(
        "--references",
        type=Path,
        required=True,
        help="Directory holding the reference images (and optionally a label CSV).",
    )
    parser.add_argument(
        "--csv-name",
        type=str,
        default="references.csv",
        help="CSV inside --references with 'label,path' rows. "
        "If missing, every image in the directory is used, labeled by file name.",
    )
    parser.add_argument(
        "--side",
        type=int,
        default=DEFAULT_SIDE,
        help="Side length (pixels) of the square grid images are downsampled to.",
    )
    parser.add_argument(
        "--locale",
        type=str,
        choices=sorted(LOCALE_SEPARATORS),
        default="en-US",
        help="Digit grouping style used for scores in the report.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        rasterizer = Rasterizer(side=args.side)
        dataset = load_reference_dataset(args.references, csv_name=args.csv_name)
        refs = build_reference_set(dataset.load_images(), rasterizer=rasterizer)

        for index, query_path in enumerate(args.query):
            logger.info("classifying %s", query_path)
            report = classify(load_rgba(query_path), refs)
            if len(args.query) > 1:
                if index:
                    print()
                print(f"== {query_path}")
            print(format_report(report, locale=args.locale))
    except (ValueError, FileNotFoundError) as exc:
        logger.debug("classification failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())
