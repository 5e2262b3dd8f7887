import pytest

from lawnwar.frame import FrameManager
from lawnwar.timers import (
    MAX_TIMERS,
    FrameTimerQueue,
    Timer,
    TimerLimitError,
    TimerQueue,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def queue(clock):
    return TimerQueue(clock)


@pytest.fixture
def log():
    return []


def run_at(clock, queue, moment):
    clock.now = moment
    queue.update()


def test_timers_compare_by_timeout():
    early = Timer(1.0, lambda: None)
    late = Timer(2.0, lambda: None)
    assert early < late
    assert early.id != late.id


def test_zero_timeout_with_interval_fires_now_then_repeats(clock, queue, log):
    queue.add_timer(0, lambda: log.append(clock.now), 0.2)
    assert log == [0.0]
    expected = {0.1: [0.0], 0.2: [0.0, 0.2], 0.4: [0.0, 0.2, 0.4]}
    for moment, seen in expected.items():
        run_at(clock, queue, moment)
        assert log == seen


def test_zero_timeout_without_interval_schedules_nothing(queue, log):
    assert queue.add_timer(0, lambda: log.append(1)) is None
    assert log == [1]
    assert len(queue) == 0


def test_one_shot_fires_once(clock, queue, log):
    queue.add_timer(1.0, lambda: log.append("x"))
    run_at(clock, queue, 5.0)
    queue.update()
    assert log == ["x"]
    assert len(queue) == 0


def test_due_timers_run_in_timeout_order(clock, queue, log):
    for timeout, label in [(3.0, "c"), (1.0, "a"), (2.0, "b")]:
        queue.add_timer(timeout, lambda label=label: log.append(label))
    run_at(clock, queue, 10.0)
    assert log == ["a", "b", "c"]


def test_deleted_timer_never_fires(clock, queue, log):
    queue.del_timer(queue.add_timer(1.0, lambda: log.append(1)))
    run_at(clock, queue, 2.0)
    assert log == []


def test_reset_drops_everything(clock, queue, log):
    queue.add_timer(1.0, lambda: log.append(1), 1.0)
    queue.reset()
    run_at(clock, queue, 3.0)
    assert log == []
    assert len(queue) == 0


def test_limit_raises(queue):
    for _ in range(MAX_TIMERS + 1):
        queue.add_timer(1.0, lambda: None)
    with pytest.raises(TimerLimitError):
        queue.add_timer(1.0, lambda: None)


def tick(frames, frame_queue, count):
    for _ in range(count):
        frames.update()
        frame_queue.update()


def test_frame_timer_fires_after_frames(log):
    frames = FrameManager()
    frame_queue = FrameTimerQueue(frames)
    frame_queue.add_timer(3, lambda: log.append(frames.frame))
    tick(frames, frame_queue, 2)
    assert log == []
    tick(frames, frame_queue, 1)
    assert log == [3]


def test_frame_timer_repeats_every_interval(log):
    frames = FrameManager()
    frame_queue = FrameTimerQueue(frames)
    frame_queue.add_timer(2, lambda: log.append(frames.frame), 2)
    tick(frames, frame_queue, 6)
    assert log == [2, 4, 6]


def test_frame_timer_rejects_negative_counts():
    with pytest.raises(ValueError):
        FrameTimerQueue(FrameManager()).add_timer(-1, lambda: None)


def test_frame_timer_queue_instance_is_shared():
    shared = FrameTimerQueue.instance()
    shared.reset()
    timer_id = shared.add_timer(5, lambda: None)
    assert len(FrameTimerQueue.instance()) == 1
    FrameTimerQueue.instance().del_timer(timer_id)
    assert len(shared) == 0
    shared.reset()