from typing import Iterable, Sequence
from pathlib import Path
import csv
import logging
import math

from pyprofiler.core.exceptions import IngestionError

from .state import State


class SampleStore:
    """
    Holds the performance data of an actuator, recorded while it was
    accelerating (positive motor output) and while it was decelerating
    (negative motor output).

    Attributes
    ----------
    forward_samples : tuple[State, ...]
        The acceleration samples in capture order.
    reverse_samples : tuple[State, ...]
        The deceleration samples, reversed end-to-end with respect to
        capture order.

    Both sequences are immutable. Use one of the class methods `from_rows()`
    or `from_csv()` to create a store from raw records.
    """
    def __init__(
        self,
        forward_samples: Sequence[State],
        reverse_samples: Sequence[State]
    ) -> None:
        self.forward_samples: tuple[State, ...] = tuple(forward_samples)
        self.reverse_samples: tuple[State, ...] = tuple(reverse_samples)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[str | float]],
        source: str | None = None,
        logger: logging.Logger | None = None
    ) -> 'SampleStore':
        """
        Creates a `SampleStore` from records `(output, pos, rate, time)`.

        Parameters
        ----------
        rows:
            Iterable of records. Fields may be numbers or strings. Records
            with less than four fields are skipped, fields beyond the fourth
            are ignored.
        source: optional
            Name of the data source, only used in error messages.
        logger: optional
            Logger to report the load result.

        Raises
        ------
        IngestionError
            If a field cannot be converted to a finite float.
        """
        logger = logger or logging.getLogger(__name__)
        forward, reverse = [], []
        discarded = 0
        for line_number, row in enumerate(rows, start=1):
            if len(row) < 4:
                continue
            try:
                output, pos, rate, time = (float(field) for field in row[:4])
            except (TypeError, ValueError) as err:
                raise IngestionError(
                    f"cannot parse record {list(row)!r}: {err}",
                    path=source,
                    line_number=line_number
                ) from err
            if not all(math.isfinite(v) for v in (output, pos, rate, time)):
                raise IngestionError(
                    f"non-finite value in record {list(row)!r}",
                    path=source,
                    line_number=line_number
                )
            if output > 0:
                forward.append(State(output, pos, rate, time))
            elif output < 0:
                reverse.append(State(output, pos, rate, time))
            else:
                discarded += 1
        reverse.reverse()
        logger.info(
            f"Loaded {len(forward)} acceleration and {len(reverse)} "
            f"deceleration samples from {source or 'rows'} "
            f"({discarded} zero-output records discarded)."
        )
        return cls(forward, reverse)

    @classmethod
    def from_csv(
        cls,
        file_path: str | Path,
        logger: logging.Logger | None = None
    ) -> 'SampleStore':
        """
        Creates a `SampleStore` from a csv-file with one record
        `output, pos, rate, time` per line.

        Raises
        ------
        IngestionError
            If the file cannot be read or a record cannot be parsed.
        """
        file_path = Path(file_path)
        try:
            with file_path.open(newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as err:
            raise IngestionError(
                f"cannot read sample file: {err}",
                path=str(file_path)
            ) from err
        return cls.from_rows(rows, source=str(file_path), logger=logger)

    def __len__(self) -> int:
        return len(self.forward_samples) + len(self.reverse_samples)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(forward={len(self.forward_samples)}, "
            f"reverse={len(self.reverse_samples)})"
        )
