from dataclasses import dataclass


@dataclass(frozen=True)
class State:
    """
    One sample of a trajectory.

    Attributes
    ----------
    output : float
        Signed motor output. A positive output accelerates the actuator
        forward, a negative output decelerates it.
    pos : float
        Cumulative displacement along the path.
    rate : float
        Instantaneous speed (magnitude).
    time : float
        Elapsed time since the start of the capture (or of the generated
        trajectory).

    States are immutable, so the sample sequences of a `SampleStore` can be
    shared by any number of `generate()` calls. Use `dataclasses.replace()`
    to derive a shifted copy.
    """
    output: float
    pos: float
    rate: float
    time: float

    @property
    def accelerating(self) -> bool:
        return self.output > 0

    @property
    def decelerating(self) -> bool:
        return self.output < 0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.output, self.pos, self.rate, self.time
