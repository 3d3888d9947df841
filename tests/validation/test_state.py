"""Tests for progress and cancellation state."""

import threading

import pytest

from workbook_guard.validation.state import ProgressTracker, ValidationState, percent_complete


class TestPercentComplete:
    @pytest.mark.parametrize(
        "completed, total, expected",
        [(0, 4, 0), (1, 4, 25), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 3, 100), (0, 0, 0)],
    )
    def test_rounding(self, completed, total, expected):
        assert percent_complete(completed, total) == expected


class TestValidationState:
    def test_cancel_sets_flag_and_resets_progress(self):
        state = ValidationState(progress=40)
        state.cancel()

        assert state.is_cancelled is True
        assert state.progress == 0

    def test_reset_clears_flag(self):
        state = ValidationState()
        state.cancel()
        state.reset()

        assert state.is_cancelled is False
        assert state.progress == 0

    def test_listeners_receive_updates(self):
        state = ValidationState()
        seen = []
        unsubscribe = state.on_progress(seen.append)

        state.set_progress(10)
        state.set_progress(150)
        unsubscribe()
        state.set_progress(20)

        assert seen == [10, 100]
        assert state.progress == 20

    def test_unsubscribe_twice_is_harmless(self):
        state = ValidationState()
        unsubscribe = state.on_progress(lambda percent: None)
        unsubscribe()
        unsubscribe()

    def test_cancel_from_another_thread(self):
        state = ValidationState()
        worker = threading.Thread(target=state.cancel)
        worker.start()
        worker.join()

        assert state.is_cancelled is True


class TestProgressTracker:
    def test_never_exceeds_total(self):
        state = ValidationState()
        tracker = ProgressTracker(state, total_steps=2)

        assert tracker.advance() == 50
        assert tracker.advance() == 100
        assert tracker.advance() == 100
        assert tracker.completed_steps == 2
        assert state.progress == 100
