from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .geometry import Point2D, Polygon


class PointModel(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, pt: Point2D) -> "PointModel":
        return cls(x=pt.x, y=pt.y)

    def to_point(self) -> Point2D:
        return Point2D(self.x, self.y)


def _to_models(polygon: Polygon) -> List[PointModel]:
    return [PointModel.from_point(p) for p in polygon.vertices]


def _to_polygon(points: List[PointModel]) -> Polygon:
    return Polygon([p.to_point() for p in points])


class ClipJob(BaseModel):
    """
    A clipping polygon, the polygon to clip, and the strategy to use.
    """
    name: Optional[str] = None
    strategy: str = "sutherland_hodgman"
    clip: List[PointModel]
    subject: List[PointModel]

    @classmethod
    def from_polygons(cls,
                      clip_polygon: Polygon,
                      subject_polygon: Polygon,
                      strategy: str = "sutherland_hodgman",
                      name: Optional[str] = None) -> "ClipJob":
        return cls(
            name=name,
            strategy=strategy,
            clip=_to_models(clip_polygon),
            subject=_to_models(subject_polygon),
        )

    def clip_polygon(self) -> Polygon:
        return _to_polygon(self.clip)

    def subject_polygon(self) -> Polygon:
        return _to_polygon(self.subject)


class ClipResult(BaseModel):
    job: ClipJob
    status: str = Field(pattern="^(intersecting|disjoint)$")
    polygon: Optional[List[PointModel]] = None
    vertex_count: int = 0
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_outcome(cls, job: ClipJob, polygon: Optional[Polygon]) -> "ClipResult":
        if polygon is None:
            return cls(job=job, status="disjoint")
        return cls(
            job=job,
            status="intersecting",
            polygon=_to_models(polygon),
            vertex_count=len(polygon),
        )

    def result_polygon(self) -> Optional[Polygon]:
        if self.polygon is None:
            return None
        return _to_polygon(self.polygon)

    @model_validator(mode="after")
    def _validate_status_vs_polygon(self):
        if self.status == "disjoint" and self.polygon is not None:
            raise ValueError("status='disjoint' but a polygon is present")
        if self.status == "intersecting":
            if self.polygon is None:
                raise ValueError("status='intersecting' but polygon is missing")
            if self.vertex_count != len(self.polygon):
                raise ValueError("vertex_count does not match polygon length")
        return self

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "ClipResult":
        return cls.model_validate_json(data)
