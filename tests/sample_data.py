import pytest


def write_samples(path, rows):
    path.write_text(
        "\n".join(", ".join(str(v) for v in row) for row in rows) + "\n",
        encoding="utf-8"
    )
    return path


def assert_valid_profile(path, distance):
    assert path[-1].pos == pytest.approx(distance)
    times = [s.time for s in path]
    assert all(t2 > t1 for t1, t2 in zip(times, times[1:]))
    assert all(s.output != 0 for s in path)
    signs = [s.output > 0 for s in path]
    assert signs == sorted(signs, reverse=True)


# Symmetric short trip. The deceleration records are listed in capture order.
S1_ROWS = [
    (1, 0, 0, 0), (1, 1, 1, 1), (1, 3, 2, 2),
    (-1, 3, 0, 0), (-1, 2, 1, 1), (-1, 0, 2, 2),
]

# Acceleration data stops at pos 2 at speed 2, braking covers 2 units.
CRUISE_ROWS = [
    (1, 0, 0, 0), (1, 1, 1, 1), (1, 2, 2, 2),
    (-1, 0, 2, 0), (-1, 1, 1, 1), (-1, 2, 0, 2),
]

# Braking data covers a single unit.
SHORT_BRAKE_ROWS = [
    (1, 0, 0, 0), (1, 0.5, 1, 1), (1, 1.5, 2, 2), (1, 3, 3, 3), (1, 5, 4, 4),
    (-1, 0, 2, 0), (-1, 1, 0, 1),
]

# Natural end of the stitched path is 4.8 for a travel distance of 5.
OFFSET_ROWS = [
    (1, 0, 0, 0), (1, 0.5, 1, 1), (1, 1.5, 2, 2), (1, 3.8, 3, 3), (1, 5, 4, 4),
    (-1, 0, 2, 0), (-1, 1, 0, 1),
]

# Paths overlap by 0.5 after the paired advance for a distance of 4.5.
OVERLAP_ROWS = [
    (1, 0, 0, 0), (1, 1, 1, 1), (1, 2, 2, 2), (1, 3, 3, 3),
    (-1, 0, 3, 0), (-1, 1, 2, 1), (-1, 2, 1, 2), (-1, 3, 0, 3),
]

# Acceleration outruns the recorded braking speeds.
FAST_START_ROWS = [
    (1, 0, 0, 0), (1, 1, 2, 1), (1, 3, 4, 2),
    (-1, 0, 4, 0), (-1, 1, 3, 1), (-1, 2, 2, 2), (-1, 2.5, 1, 3), (-1, 3, 0, 4),
]
