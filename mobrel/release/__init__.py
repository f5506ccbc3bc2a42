"""Release pipeline: independent per-platform tracks."""

from .pipeline import (
    ReleasePipeline,
    ReleaseReport,
    ReleaseStage,
    Track,
    TrackOutcome,
    follow_up_steps,
)
from .tracks import default_tracks

__all__ = [
    "ReleasePipeline",
    "ReleaseReport",
    "ReleaseStage",
    "Track",
    "TrackOutcome",
    "default_tracks",
    "follow_up_steps",
]
