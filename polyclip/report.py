from __future__ import annotations

from typing import List

from .results import ClipResult, PointModel


def format_point(p: PointModel) -> str:
    return f"({p.x:g}, {p.y:g})"


def format_points(points: List[PointModel]) -> str:
    return ", ".join(format_point(p) for p in points)


def generate_text_report(result: ClipResult) -> str:
    lines = []

    job = result.job
    lines.append(f"Clip report for {job.name or 'unnamed job'}")
    lines.append(f"Strategy: {job.strategy}")
    lines.append(f"Clip polygon:  {len(job.clip)} vertices [{format_points(job.clip)}]")
    lines.append(f"Input polygon: {len(job.subject)} vertices [{format_points(job.subject)}]")
    lines.append("")
    lines.append(f"Status: {result.status.upper()}")
    if result.polygon is None:
        lines.append("Result: no intersection")
    else:
        lines.append(f"Result: {result.vertex_count} vertices")
        for i, p in enumerate(result.polygon):
            lines.append(f"  {i}: {format_point(p)}")

    return "\n".join(lines)


def generate_markdown_report(result: ClipResult) -> str:
    lines = []

    job = result.job
    lines.append(f"# Clip report - {job.name or 'unnamed job'}")
    lines.append("")
    lines.append(f"- Strategy: **{job.strategy}**")
    lines.append(f"- Clip polygon: **{len(job.clip)}** vertices")
    lines.append(f"- Input polygon: **{len(job.subject)}** vertices")
    lines.append(f"- Status: **{result.status.upper()}**")
    lines.append("")

    if result.polygon is None:
        lines.append("_The polygons do not intersect._")
    else:
        lines.append("| # | x | y |")
        lines.append("|---|---|---|")
        for i, p in enumerate(result.polygon):
            lines.append(f"| {i} | {p.x:g} | {p.y:g} |")
    lines.append("")

    return "\n".join(lines)
