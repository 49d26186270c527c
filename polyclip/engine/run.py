# polyclip/engine/run.py
from ..results import ClipJob, ClipResult
from .calculator import PolygonClippingCalculator


def run_clip(job: ClipJob) -> ClipResult:
    """
    High level entry point:

    - Builds a calculator for the job's strategy.
    - Clips the subject polygon against the clip polygon.
    - Wraps the outcome (polygon or nothing) in a ClipResult.
    """
    calculator = PolygonClippingCalculator.from_name(job.strategy)
    polygon = calculator.clip(job.clip_polygon(), job.subject_polygon())
    return ClipResult.from_outcome(job, polygon)
