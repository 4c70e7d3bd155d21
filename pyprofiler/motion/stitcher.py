from typing import Sequence, Iterator
from enum import StrEnum
from dataclasses import replace
import logging
import math

from pyprofiler.core.exceptions import DegenerateInputError

from .state import State
from .samples import SampleStore


class Side(StrEnum):
    FORWARD = "forward"
    REVERSE = "reverse"


class SampleCursor:
    """
    Read position in one of the sample sequences, together with the path
    built so far on that side (the progress buffer).
    """
    def __init__(self, samples: Sequence[State]) -> None:
        self._iter: Iterator[State] = iter(samples)
        self.progress: list[State] = []

    def next_sample(self) -> State | None:
        """
        Returns the next unread sample, or `None` when the sequence is
        exhausted.
        """
        return next(self._iter, None)

    def extrapolate(self) -> State | None:
        """
        Guesses the state that follows the last two states in the progress
        buffer: speed is held, position and time keep stepping by their last
        increments.

        Returns `None` if there is not enough history, if the last state is
        not an acceleration state, or if the last position step is not
        positive.
        """
        if len(self.progress) < 2:
            return None
        prev, last = self.progress[-2], self.progress[-1]
        if not last.accelerating:
            return None
        if not last.pos - prev.pos > 0:
            return None
        return State(
            output=last.output,
            pos=2 * last.pos - prev.pos,
            rate=last.rate,
            time=2 * last.time - prev.time
        )

    @property
    def last(self) -> State:
        return self.progress[-1]

    def __len__(self) -> int:
        return len(self.progress)


class StitchRun:
    """
    State of one `generate()` call: a cursor for each side, the position
    `front_end` reached by the acceleration path and the position `tail_end`
    where the deceleration path currently lands.
    """
    def __init__(
        self,
        store: SampleStore,
        distance: float
    ) -> None:
        self.distance = distance
        self.forward = SampleCursor(store.forward_samples)
        self.reverse = SampleCursor(store.reverse_samples)
        self.front_end: float = 0.0
        self.tail_end: float = distance
        self.needs_forward_fill = False

    def _cursor(self, side: Side) -> SampleCursor:
        return self.forward if side == Side.FORWARD else self.reverse

    @property
    def met(self) -> bool:
        return self.front_end >= self.tail_end

    def advance(self, side: Side) -> bool:
        """
        Appends a new state to the progress buffer of `side`, taken from the
        samples or, on the forward side only, extrapolated when the samples
        are exhausted.

        Returns `False` if nothing was appended: the two paths already meet,
        or `side` has run out of states.
        """
        if self.met:
            return False
        cursor = self._cursor(side)
        state = cursor.next_sample()
        if state is None:
            state = cursor.extrapolate()
            if state is None:
                return False
        cursor.progress.append(state)
        if self.forward.progress:
            self.front_end = self.forward.last.pos
        if side == Side.REVERSE and len(self.reverse) >= 2:
            # signed: reverse positions decrease, so the tail moves down
            self.tail_end += self.reverse.progress[-1].pos - self.reverse.progress[-2].pos
        return True

    def pair_up(self) -> None:
        """
        Advances both sides in turns and lets the slower side catch up with
        the speed of the faster side, until the paths meet or one of the
        sides runs out.
        """
        while not self.met:
            if not self.advance(Side.FORWARD):
                return
            if not self.advance(Side.REVERSE):
                self.needs_forward_fill = True
                return
            if self.forward.last.rate > self.reverse.last.rate:
                while self.forward.last.rate > self.reverse.last.rate:
                    if not self.advance(Side.REVERSE):
                        self.needs_forward_fill = True
                        return
            elif self.forward.last.rate < self.reverse.last.rate:
                while self.forward.last.rate < self.reverse.last.rate:
                    if not self.advance(Side.FORWARD):
                        return

    def fill_forward(self) -> None:
        """
        Extends the acceleration path up to the deceleration path when the
        deceleration samples ran out first.
        """
        if not self.needs_forward_fill:
            return
        while not self.met:
            if not self.advance(Side.FORWARD):
                break

    def trim_overlap(self) -> bool:
        """
        Drops the last acceleration state when the paths overlap and the
        acceleration path is the longer one. Returns `True` if a state was
        dropped.
        """
        if self.front_end > self.tail_end and len(self.forward) > len(self.reverse):
            self.forward.progress.pop()
            return True
        return False

    def _join_interval(self) -> float:
        if len(self.forward) >= 2:
            return self.forward.progress[-1].time - self.forward.progress[-2].time
        if len(self.reverse) >= 2:
            return abs(self.reverse.progress[-2].time - self.reverse.progress[-1].time)
        return 0.0

    def concatenate(self) -> list[State]:
        """
        Returns the acceleration path followed by the deceleration path in
        reverse order, shifted in time and position so that the deceleration
        path starts where the acceleration path ends.
        """
        path = list(self.forward.progress)
        if not self.forward.progress or not self.reverse.progress:
            return path
        forward_end = self.forward.last
        reverse_start = self.reverse.last
        dt = forward_end.time - reverse_start.time + self._join_interval()
        ds = forward_end.pos - reverse_start.pos
        for state in reversed(self.reverse.progress):
            path.append(replace(state, time=state.time + dt, pos=state.pos + ds))
        return path

    def end_at_distance(self, path: list[State]) -> list[State]:
        """
        Shifts the deceleration states of `path` so that the last state lands
        exactly at the target distance.
        """
        if not path:
            return path
        offset = path[-1].pos - self.distance
        return [
            replace(state, pos=state.pos - offset) if state.decelerating else state
            for state in path
        ]


class ProfileStitcher:
    """
    Generates motion profiles of a given length from the performance data
    in a `SampleStore`.

    An acceleration path is built forward from the start and a deceleration
    path backward from the end, until the two meet. The result is a path
    along which the actuator accelerates continuously up to the moment it
    has to brake.
    """
    def __init__(
        self,
        store: SampleStore,
        logger: logging.Logger | None = None
    ) -> None:
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, distance: float, strict: bool = False) -> list[State]:
        """
        Generates a motion profile covering `distance`.

        Parameters
        ----------
        distance:
            Total travel distance, in the position units of the samples.
        strict:
            If `True`, a `DegenerateInputError` is raised when no path can be
            generated (`distance` not a positive finite number, or no acceleration
            samples). Otherwise
            an empty list is returned in these cases.

        Returns
        -------
        List of `State` objects: acceleration states (positive output)
        followed by deceleration states (negative output).
        """
        valid_distance = math.isfinite(distance) and distance > 0
        if not valid_distance or not self.store.forward_samples:
            reason = (
                f"travel distance must be positive and finite, got {distance}"
                if not valid_distance else "no acceleration samples available"
            )
            if strict:
                raise DegenerateInputError(reason)
            self.logger.warning(f"Cannot generate motion profile: {reason}.")
            return []

        run = StitchRun(self.store, distance)
        run.pair_up()
        self.logger.debug(
            f"Paired advance ended at front_end={run.front_end:.6g}, "
            f"tail_end={run.tail_end:.6g} "
            f"({len(run.forward)} accel, {len(run.reverse)} decel states)."
        )
        run.fill_forward()
        if run.trim_overlap():
            self.logger.debug("Dropped last acceleration state to remove overlap.")
        path = run.end_at_distance(run.concatenate())
        self.logger.debug(
            f"Generated motion profile with {len(path)} states "
            f"for distance {distance}."
        )
        return path
