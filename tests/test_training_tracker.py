"""Tests for TrainingTracker interface and implementations."""
import io
import sys

import pytest

from src.domain.interfaces.training_tracker import TrainingTracker
from src.infrastructure.tensorflow.observability import (
    ConsoleTracker,
    SilentTracker,
    format_step,
)


class TestTrainingTrackerInterface:
    """Tests for the TrainingTracker abstract interface."""

    def test_all_methods_are_abstract(self):
        """All tracker methods should be abstract."""
        expected_abstract = {
            "on_training_start",
            "on_step_end",
            "on_training_end",
        }
        assert expected_abstract == set(TrainingTracker.__abstractmethods__)

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            TrainingTracker()


class TestConsoleTracker:
    """Tests for ConsoleTracker implementation."""

    def test_console_tracker_implements_interface(self):
        assert isinstance(ConsoleTracker(), TrainingTracker)

    def test_format_step(self):
        assert format_step(50, 0.1234567) == "step=50 loss=0.123457"

    def test_writes_loss_every_n_steps(self, capsys):
        tracker = ConsoleTracker(log_every=2, show_progress=False)

        tracker.on_training_start(total_steps=5, dataset_name="TestDataset")
        for step in range(1, 6):
            tracker.on_step_end(step, loss=1.0 / step)
        tracker.on_training_end(final_loss=0.1)

        assert tracker.lines == ["step=2 loss=0.500000", "step=4 loss=0.250000"]
        out = capsys.readouterr().out
        assert "step=2 loss=0.500000" in out
        assert "step=4 loss=0.250000" in out
        assert "step=3" not in out
        assert "Final loss" not in out

    def test_lines_reset_between_runs(self):
        tracker = ConsoleTracker(log_every=1, show_progress=False)
        for _ in range(2):
            tracker.on_training_start(total_steps=1)
            tracker.on_step_end(1, loss=0.5)
            tracker.on_training_end(final_loss=0.5)
        assert tracker.lines == ["step=1 loss=0.500000"]

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError, match="log_every"):
            ConsoleTracker(log_every=0)


class TestSilentTracker:
    def test_silent_tracker_produces_no_output(self):
        """SilentTracker should produce no console output."""
        tracker = SilentTracker()

        # Capture stdout
        captured = io.StringIO()
        old_stdout = sys.stdout
        old_stderr = sys.stderr
        sys.stdout = captured
        sys.stderr = captured

        try:
            tracker.on_training_start(total_steps=5)
            for step in range(1, 6):
                tracker.on_step_end(step, loss=0.5)
            tracker.on_training_end(final_loss=0.5)
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr

        assert captured.getvalue() == "", "SilentTracker should produce no output"
