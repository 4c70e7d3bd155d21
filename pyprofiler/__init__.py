"""
Motion profiles from recorded actuator performance data.

A `SampleStore` holds the acceleration and deceleration samples of an
actuator; a `ProfileStitcher` combines them into a trajectory covering a
requested travel distance.
"""

from .motion import State, SampleStore, ProfileStitcher, Trajectory
from .core import IngestionError, DegenerateInputError, ConfigurationError


__version__ = "0.1.0"

__all__ = [
    "State",
    "SampleStore",
    "ProfileStitcher",
    "Trajectory",
    "IngestionError",
    "DegenerateInputError",
    "ConfigurationError"
]
