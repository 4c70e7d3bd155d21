from typing import Callable, Sequence, TextIO
import csv

import numpy as np
from scipy.interpolate import interp1d

from .state import State


class Trajectory:
    """
    Generated motion profile, with numpy views on its columns and lookup
    functions between time, position and velocity.
    """
    def __init__(self, states: Sequence[State]) -> None:
        self.states: list[State] = list(states)
        self.output_array = np.array([s.output for s in self.states], dtype=float)
        self.position_array = np.array([s.pos for s in self.states], dtype=float)
        self.velocity_array = np.array([s.rate for s in self.states], dtype=float)
        self.time_array = np.array([s.time for s in self.states], dtype=float)

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    @property
    def duration(self) -> float:
        if not self.states:
            return 0.0
        return float(self.time_array[-1] - self.time_array[0])

    @property
    def distance(self) -> float:
        if not self.states:
            return 0.0
        return float(self.position_array[-1] - self.position_array[0])

    @property
    def top_speed(self) -> float:
        if not self.states:
            return 0.0
        return float(self.velocity_array.max())

    @property
    def accel_count(self) -> int:
        return sum(1 for s in self.states if s.accelerating)

    @property
    def decel_count(self) -> int:
        return sum(1 for s in self.states if s.decelerating)

    @staticmethod
    def _clamped(x_ax: np.ndarray, y_ax: np.ndarray) -> Callable[[float], float]:
        if len(x_ax) < 2:
            raise ValueError("At least two states are needed for interpolation.")
        interp = interp1d(x_ax, y_ax)

        def f(x: float) -> float:
            if x <= x_ax[0]:
                return float(y_ax[0])
            if x >= x_ax[-1]:
                return float(y_ax[-1])
            return float(interp(x))

        return f

    def get_position_from_time_fn(self) -> Callable[[float], float]:
        """
        Returns a function that takes a time moment `t` and returns the
        position at that moment. Outside the time span of the trajectory the
        first or last position is returned.
        """
        return self._clamped(self.time_array, self.position_array)

    def get_velocity_from_time_fn(self) -> Callable[[float], float]:
        """
        Returns a function that takes a time moment `t` and returns the
        velocity at that moment (clamped like `get_position_from_time_fn`).
        """
        return self._clamped(self.time_array, self.velocity_array)

    def get_time_from_position_fn(self) -> Callable[[float], float]:
        """
        Returns a function that takes a position `s` and returns the time
        moment this position is reached.

        Where consecutive states share a position, the first of them is kept.

        Raises
        ------
        ValueError
            If positions decrease somewhere along the trajectory, so that a
            position does not map to a single time moment.
        """
        if np.any(np.diff(self.position_array) < 0):
            raise ValueError("Positions decrease along the trajectory.")
        s_ax, idx = np.unique(self.position_array, return_index=True)
        return self._clamped(s_ax, self.time_array[idx])

    def write_csv(self, stream: TextIO) -> None:
        """Writes the states as `output, pos, rate, time` records."""
        writer = csv.writer(stream, lineterminator="\n")
        for state in self.states:
            writer.writerow(state.as_tuple())
