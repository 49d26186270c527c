from __future__ import annotations

from pathlib import Path

from .results import ClipJob, ClipResult


def load_clip_job(path: Path) -> ClipJob:
    """Load a clip job JSON file: {"clip": [{"x":..,"y":..}, ...], "subject": [...]}."""
    text = Path(path).read_text(encoding="utf-8")
    job = ClipJob.model_validate_json(text)
    if job.name is None:
        job.name = Path(path).stem
    return job


def save_clip_result(result: ClipResult, path: Path) -> None:
    Path(path).write_text(result.to_json(), encoding="utf-8")


def load_clip_result(path: Path) -> ClipResult:
    text = Path(path).read_text(encoding="utf-8")
    return ClipResult.from_json(text)
