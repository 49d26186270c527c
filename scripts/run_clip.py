from __future__ import annotations

import argparse
import logging
from pathlib import Path

from polyclip import ClipJob, Point2D, Polygon
from polyclip.config import configure_logging, default_strategy_name
from polyclip.engine import run_clip
from polyclip.io import load_clip_job
from polyclip.report import generate_text_report

logger = logging.getLogger("polyclip.scripts.run_clip")


def sample_jobs() -> list[ClipJob]:
    """
    The square window used in both samples, against two triangles.
    """
    square = Polygon([
        Point2D(150.0, 150.0),
        Point2D(200.0, 150.0),
        Point2D(200.0, 200.0),
        Point2D(150.0, 200.0),
    ])
    strategy = default_strategy_name()
    return [
        ClipJob.from_polygons(
            square,
            Polygon([Point2D(100.0, 150.0), Point2D(200.0, 250.0), Point2D(300.0, 200.0)]),
            strategy=strategy,
            name="square-vs-flat-triangle",
        ),
        ClipJob.from_polygons(
            square,
            Polygon([Point2D(200.0, 100.0), Point2D(300.0, 300.0), Point2D(100.0, 300.0)]),
            strategy=strategy,
            name="square-vs-tall-triangle",
        ),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Clip a polygon against a convex polygon")
    parser.add_argument("job", nargs="?", type=Path, help="clip job JSON file (runs the samples if omitted)")
    parser.add_argument("--json", action="store_true", help="print the result as JSON instead of a report")
    parser.add_argument("--log-level", default=None, help="overrides POLYCLIP_LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(args.log_level)

    if args.job is not None:
        if not args.job.exists():
            print(f"Job file not found: {args.job}")
            raise SystemExit(1)
        jobs = [load_clip_job(args.job)]
    else:
        jobs = sample_jobs()

    for job in jobs:
        logger.info("running %s with %s", job.name, job.strategy)
        result = run_clip(job)
        if args.json:
            print(result.to_json())
        else:
            print(generate_text_report(result))
            print("")


if __name__ == "__main__":
    main()
