"""
Training Tracker Interface.

This module defines the abstract interface for tracking training progress.
Implementations can provide console output with progress bars, or stay
silent for tests and non-interactive runs.
"""
from abc import ABC, abstractmethod


class TrainingTracker(ABC):
    """
    Abstract interface for tracking gradient-descent progress.

    The lifecycle follows:
    1. on_training_start() - called once at the beginning
    2. on_step_end() - called after every update step
    3. on_training_end() - called once at the end
    """

    @abstractmethod
    def on_training_start(
        self,
        total_steps: int,
        dataset_name: str | None = None,
    ) -> None:
        """
        Called when training begins.

        Parameters
        ----------
        total_steps : int
            Total number of gradient-descent steps.
        dataset_name : str | None, optional
            Name of the dataset being trained on.
        """
        pass

    @abstractmethod
    def on_step_end(self, step: int, loss: float) -> None:
        """
        Called after each update step.

        Parameters
        ----------
        step : int
            Current step number (1-indexed).
        loss : float
            Loss value computed during this step, before the update.
        """
        pass

    @abstractmethod
    def on_training_end(self, final_loss: float) -> None:
        """
        Called when training completes.

        Parameters
        ----------
        final_loss : float
            Loss of the final weights.
        """
        pass
