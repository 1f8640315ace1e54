"""
Module: importer.timing

Purpose:
    Stage timing for the import pipeline. Durations are only logged;
    they never enter a ParseResult, so results stay deterministic.

Key Classes:
    - TimingLog: Collects per-stage durations for one document

Key Functions:
    - timed_stage: Context manager for timing a pipeline stage

Dependencies:
    - time (std)
    - contextlib (std)

Used By:
    - importer.pipeline
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, List, Tuple


@dataclass
class TimingLog:
    """
    Stage durations for one parse_document call.

    Attributes:
        stage_timings: stage_name -> duration_seconds, in execution order

    Example:
        >>> log = TimingLog()
        >>> log.log_stage("extract", 0.012)
        >>> log.total
        0.012
    """
    stage_timings: Dict[str, float] = field(default_factory=dict)

    def log_stage(self, stage: str, duration: float) -> None:
        """Record a stage duration; repeated stages accumulate."""
        self.stage_timings[stage] = self.stage_timings.get(stage, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.stage_timings.values())

    def slowest(self, n: int = 1) -> List[Tuple[str, float]]:
        """The N slowest stages, slowest first."""
        ranked = sorted(self.stage_timings.items(), key=lambda x: -x[1])
        return ranked[:n]

    def summary(self) -> str:
        """Human-readable timing summary."""
        lines = ["=== Import Timing Summary ==="]
        for stage, duration in self.stage_timings.items():
            lines.append(f"  {stage:20s} {duration:.4f}s")
        lines.append(f"  {'total':20s} {self.total:.4f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, float]:
        return dict(self.stage_timings)


@contextmanager
def timed_stage(log: TimingLog, stage: str) -> Generator[None, None, None]:
    """
    Time the enclosed block as one pipeline stage.

    The duration is recorded even when the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_stage(log, "preprocess"):
        ...     text = preprocess_text(raw)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_stage(stage, time.perf_counter() - start)
