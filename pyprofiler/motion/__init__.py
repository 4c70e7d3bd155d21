from .state import State
from .samples import SampleStore
from .stitcher import Side, SampleCursor, StitchRun, ProfileStitcher
from .trajectory import Trajectory

__all__ = [
    "State",
    "SampleStore",
    "Side",
    "SampleCursor",
    "StitchRun",
    "ProfileStitcher",
    "Trajectory"
]
