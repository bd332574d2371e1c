"""Tests for the playback engine: Stepper navigation, Player auto-play, Recorder runs."""

import json

import pytest

from algorithms.bubble_sort import bubble_sort
from algorithms.step import Step
from engine import Player, Recorder, Stepper, StepperState, DEFAULT_SPEED
from engine.stepper import MIN_SPEED


VALUES = [5, 3, 8, 1]


@pytest.fixture
def stepper():
    s = Stepper()
    s.load(VALUES, bubble_sort(VALUES))
    return s


class TestStepper:
    def test_starts_idle(self):
        s = Stepper()
        assert s.state == StepperState.IDLE
        assert s.next_step() is False
        assert s.current_frame == Step()

    def test_frame_zero_is_the_raw_input(self, stepper):
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED
        assert stepper.current_frame == Step(array=VALUES)
        # trace[0] is never shown at index 0
        assert stepper.current_frame != stepper.steps[0]

    def test_other_frames_come_from_the_trace(self, stepper):
        assert stepper.next_step() is True
        assert stepper.current_frame is stepper.steps[1]

    def test_advancing_saturates_at_the_end(self, stepper):
        while stepper.next_step():
            pass
        assert stepper.is_finished
        assert stepper.current_idx == stepper.total_steps - 1
        assert stepper.next_step() is False
        assert stepper.current_idx == stepper.total_steps - 1
        assert list(stepper.current_frame.array) == sorted(VALUES)

    def test_empty_trace(self):
        s = Stepper()
        s.load([], [])
        assert s.current_frame == Step()
        assert s.next_step() is False
        assert s.is_finished

    def test_rewind_clears_finished(self, stepper):
        stepper.jump_to_end()
        assert stepper.is_finished
        stepper.rewind()
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED

    def test_prev_step(self, stepper):
        assert stepper.prev_step() is False
        stepper.next_step()
        stepper.next_step()
        assert stepper.prev_step() is True
        assert stepper.current_idx == 1

    def test_goto_step(self, stepper):
        assert stepper.goto_step(3) is True
        assert stepper.current_frame is stepper.steps[3]
        assert stepper.goto_step(stepper.total_steps) is False
        assert stepper.goto_step(-1) is False
        assert stepper.current_idx == 3

    def test_on_step_callback(self):
        seen = []
        s = Stepper(on_step=seen.append)
        s.load(VALUES, bubble_sort(VALUES))
        s.next_step()
        assert seen == [Step(array=VALUES), s.steps[1]]

    def test_load_replaces_previous_trace(self, stepper):
        stepper.jump_to_end()
        stepper.load([2, 1], bubble_sort([2, 1]))
        assert stepper.current_idx == 0
        assert stepper.current_frame.array == (2, 1)
        assert not stepper.is_finished

    def test_reset(self, stepper):
        stepper.reset()
        assert stepper.state == StepperState.IDLE
        assert stepper.total_steps == 0


class TestPlayPause:
    def test_toggle(self, stepper):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state == StepperState.PAUSED

    def test_play_is_ignored_when_finished(self, stepper):
        stepper.jump_to_end()
        stepper.play()
        assert stepper.is_finished

    def test_tick_waits_for_speed_interval(self, stepper, monkeypatch):
        clock = [100.0]
        monkeypatch.setattr("engine.stepper.time.monotonic", lambda: clock[0])
        stepper.set_speed_value(0.5)
        stepper.play()

        clock[0] += 0.2
        assert stepper.tick() is False
        clock[0] += 0.4
        assert stepper.tick() is True
        assert stepper.current_idx == 1

    def test_tick_does_nothing_when_paused(self, stepper):
        assert stepper.tick() is False
        assert stepper.current_idx == 0


class TestSpeed:
    def test_default(self):
        assert Stepper().speed == DEFAULT_SPEED

    def test_presets(self, stepper):
        stepper.set_speed("slow")
        assert stepper.speed == 0.5
        stepper.set_speed("warp")
        assert stepper.speed == DEFAULT_SPEED

    def test_value_is_floored(self, stepper):
        stepper.set_speed_value(0)
        assert stepper.speed == MIN_SPEED

    @pytest.mark.parametrize("value,seconds", [(10, 0.5), (410, 0.1), (500, 0.01), (1000, 0.01), (0, 0.5)])
    def test_slider(self, stepper, value, seconds):
        stepper.set_speed_slider(value)
        assert stepper.speed == pytest.approx(seconds)


class TestPlayer:
    def test_plays_to_the_end(self, stepper):
        stepper.set_speed_value(0.01)
        player = Player(stepper)
        player.start()
        assert player.wait(timeout=10)
        assert stepper.is_finished
        assert stepper.current_idx == stepper.total_steps - 1
        assert not player.is_running

    def test_stop_cancels_without_waiting_for_the_interval(self, stepper):
        stepper.set_speed_value(30)
        player = Player(stepper)
        player.start()
        assert player.is_running
        player.stop()
        assert not player.is_running
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED

    def test_start_on_finished_stepper_is_a_no_op(self, stepper):
        stepper.jump_to_end()
        player = Player(stepper)
        player.start()
        assert not player.is_running
        assert player.wait(timeout=1)


class TestRecorder:
    def test_requires_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_metrics(self):
        rec = Recorder()
        rec.start("quick", VALUES)
        metrics = rec.run_to_completion()
        assert metrics is rec.get_metrics()
        assert metrics.algo_key == "quick"
        assert metrics.algo_label == "Quick Sort"
        assert metrics.array_size == 4
        assert metrics.total_steps == 15
        assert metrics.comparisons == 5
        assert metrics.swaps == 2
        assert metrics.wall_time_ms >= 0
        assert metrics.memory_bytes > 0

    def test_loads_a_fresh_stepper(self):
        rec = Recorder()
        rec.start("merge", VALUES)
        rec.run_to_completion()
        assert rec.stepper.total_steps == len(rec.steps)
        assert rec.stepper.current_frame == Step(array=VALUES)

    def test_unknown_algorithm_uses_bubble(self):
        rec = Recorder()
        rec.start("nope", VALUES)
        rec.run_to_completion()
        assert rec.metrics.algo_key == "bubble"
        assert rec.steps == bubble_sort(VALUES)

    def test_input_is_copied_at_start(self):
        values = list(VALUES)
        rec = Recorder()
        rec.start("selection", values)
        values.clear()
        rec.run_to_completion()
        assert rec.values == VALUES

    def test_export_is_json_serialisable(self):
        rec = Recorder()
        rec.start("insertion", VALUES)
        rec.run_to_completion()
        data = json.loads(json.dumps(rec.export()))
        assert data["algo_key"] == "insertion"
        assert data["array"] == VALUES
        assert data["metrics"]["total_steps"] == len(data["steps"])
        assert data["steps"][-1]["array"] == sorted(VALUES)
