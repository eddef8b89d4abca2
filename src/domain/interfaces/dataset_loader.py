from abc import ABC, abstractmethod

from src.domain.entities.dataset import RegressionDataset


class DatasetLoader(ABC):
    """Abstract interface for dataset loading."""

    @abstractmethod
    def load(self, num_samples: int, true_weights: list[float], offset: float) -> RegressionDataset:
        """
        Build a regression dataset whose targets follow a known linear rule.

        Parameters:
            num_samples (int): Number of rows in the design matrix.
            true_weights (list[float]): Weights used to generate targets; their count sets the number of features.
            offset (float): Constant added to every target.

        Returns:
            RegressionDataset: Features of shape (num_samples, len(true_weights)) and matching targets.
        """
        pass
