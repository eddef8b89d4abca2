"""
Observability module for TensorFlow training.

This module provides:
- TrainingTracker implementations (ConsoleTracker, SilentTracker)
- TensorFlow logging suppression utilities
- Progress bar integration using tqdm
"""
import logging
import os

from tqdm import tqdm

from src.domain.interfaces.training_tracker import TrainingTracker


def suppress_tensorflow_logging() -> None:
    """
    Suppress verbose TensorFlow logging messages.

    This redirects TensorFlow's internal logging to Python's logging system
    and sets the log level to ERROR to hide INFO/WARNING messages like:
    - "oneDNN custom operations are on..."
    - CPU/GPU feature warnings

    Should be called before importing TensorFlow.
    """
    # Set TensorFlow log level via environment variable (before TF import)
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "2"  # 0=ALL, 1=WARNING+, 2=ERROR+, 3=FATAL

    # Suppress absl logging (used by TensorFlow internally)
    logging.getLogger("tensorflow").setLevel(logging.ERROR)
    logging.getLogger("absl").setLevel(logging.ERROR)

    # Try to suppress TensorFlow's own logger if already imported
    try:
        import tensorflow as tf
        tf.get_logger().setLevel(logging.ERROR)
    except ImportError:
        # Safe to ignore: TensorFlow not yet imported, so no logger to suppress.
        pass


def format_step(step: int, loss: float) -> str:
    """Render a progress line such as `step=50 loss=0.123456`."""
    return f"step={step} loss={loss:.6f}"


class ConsoleTracker(TrainingTracker):
    """
    Training tracker with a tqdm progress bar and periodic loss lines.

    Attributes
    ----------
    log_every : int
        A `step=<i> loss=<value>` line is written every `log_every` steps.
    show_progress : bool
        Whether to display the progress bar.
    """

    def __init__(self, log_every: int = 50, show_progress: bool = True) -> None:
        """
        Initialize the ConsoleTracker.

        Parameters
        ----------
        log_every : int, optional
            Interval, in steps, between loss lines. Default is 50.
        show_progress : bool, optional
            Whether to display the progress bar. Default is True.
        """
        if log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {log_every}")
        self.log_every = log_every
        self.show_progress = show_progress
        self._pbar: tqdm | None = None
        self._total_steps = 0
        self.lines: list[str] = []

    def on_training_start(
        self,
        total_steps: int,
        dataset_name: str | None = None,
    ) -> None:
        """
        Called when training begins. Initializes the progress bar.

        Parameters
        ----------
        total_steps : int
            Total number of update steps.
        dataset_name : str | None, optional
            Name of the dataset being trained on.
        """
        self._total_steps = total_steps
        self.lines = []

        desc = "Training"
        if dataset_name:
            desc = f"Training on {dataset_name}"

        self._pbar = tqdm(
            total=total_steps,
            desc=desc,
            unit="step",
            leave=True,
            disable=not self.show_progress,
        )

    def on_step_end(self, step: int, loss: float) -> None:
        """
        Called after each step. Updates the bar and writes a loss line every `log_every` steps.

        Parameters
        ----------
        step : int
            Current step number (1-indexed).
        loss : float
            Loss value for this step.
        """
        if self._pbar is not None:
            self._pbar.set_postfix({"loss": f"{loss:.4f}"})
            self._pbar.update(1)

        if step % self.log_every == 0:
            line = format_step(step, loss)
            self.lines.append(line)
            tqdm.write(line)

    def on_training_end(self, final_loss: float) -> None:
        """Called when training completes. Closes the progress bar."""
        if self._pbar is not None:
            self._pbar.close()
            self._pbar = None


class SilentTracker(TrainingTracker):
    """
    Training tracker that produces no output.

    Useful for testing or when running in non-interactive environments
    where progress output is not desired.
    """

    def on_training_start(
        self,
        total_steps: int,
        dataset_name: str | None = None,
    ) -> None:
        """No-op implementation."""
        pass

    def on_step_end(self, step: int, loss: float) -> None:
        """No-op implementation."""
        pass

    def on_training_end(self, final_loss: float) -> None:
        """No-op implementation."""
        pass
