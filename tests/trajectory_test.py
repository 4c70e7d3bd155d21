import io

import numpy as np
import pytest

from pyprofiler.motion import State, ProfileStitcher, Trajectory


@pytest.fixture
def trajectory(overlap_store):
    return Trajectory(ProfileStitcher(overlap_store).generate(4.5))


def test_summary(trajectory):
    assert len(trajectory) == 6
    assert trajectory.duration == pytest.approx(5)
    assert trajectory.distance == pytest.approx(4.5)
    assert trajectory.top_speed == pytest.approx(2)
    assert trajectory.accel_count == 3
    assert trajectory.decel_count == 3
    np.testing.assert_allclose(trajectory.time_array, [0, 1, 2, 3, 4, 5])
    np.testing.assert_allclose(trajectory.output_array, [1, 1, 1, -1, -1, -1])


def test_lookup_functions(trajectory):
    s_from_t = trajectory.get_position_from_time_fn()
    v_from_t = trajectory.get_velocity_from_time_fn()
    t_from_s = trajectory.get_time_from_position_fn()

    assert s_from_t(4.5) == pytest.approx(4.0)
    assert s_from_t(-1.0) == pytest.approx(0.0)
    assert v_from_t(2.5) == pytest.approx(2.0)
    assert v_from_t(10.0) == pytest.approx(0.0)
    assert t_from_s(2.25) == pytest.approx(2.5)
    assert t_from_s(100.0) == pytest.approx(5.0)


def test_lookup_needs_two_states():
    with pytest.raises(ValueError):
        Trajectory([]).get_position_from_time_fn()


def test_empty_trajectory():
    trajectory = Trajectory([])
    assert trajectory.duration == 0.0
    assert trajectory.distance == 0.0
    assert trajectory.top_speed == 0.0


def test_write_csv(trajectory):
    stream = io.StringIO()
    trajectory.write_csv(stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 6
    assert lines[0] == "1.0,0.0,0.0,0.0"
    assert lines[-1] == "-1.0,4.5,0.0,5.0"


def test_time_lookup_rejects_decreasing_positions():
    trajectory = Trajectory([
        State(1, 0, 0, 0), State(1, 2, 2, 1), State(-1, 1.5, 1, 2), State(-1, 3, 0, 3),
    ])
    with pytest.raises(ValueError):
        trajectory.get_time_from_position_fn()
    assert trajectory.get_position_from_time_fn()(1.5) == pytest.approx(1.75)
