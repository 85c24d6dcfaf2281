from __future__ import annotations

from typing import Any, Dict, Optional

from .trends import TREND_METRICS


def _fmt(value: Optional[float], signed: bool = False) -> str:
    if value is None:
        return "n/a"
    return f"{value:+.2f}" if signed else f"{value:.2f}"


def render_text(summary: Dict[str, Any]) -> str:
    early = summary.get("earlyAverages", {})
    recent = summary.get("recentAverages", {})
    deltas = summary.get("deltas", {})

    lines = []
    lines.append("SEASON TREND")
    lines.append(
        f"Games: {summary.get('gameCount', 0)} | "
        f"Window: first/last {summary.get('windowSize', 0)}"
    )
    lines.append("")

    lines.append(f"{'metric':<14}{'early':>8}{'recent':>8}{'delta':>8}")
    for name, _ in TREND_METRICS:
        lines.append(
            f"{name:<14}{_fmt(early.get(name)):>8}{_fmt(recent.get(name)):>8}"
            f"{_fmt(deltas.get(name), signed=True):>8}"
        )

    return "\n".join(lines)
