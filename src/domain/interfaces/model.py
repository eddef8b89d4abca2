from abc import ABC, abstractmethod

from src.domain.entities.dataset import RegressionDataset
from src.domain.entities.tensor import Tensor


class Model(ABC):
    """Abstract interface for regression models trained by gradient descent."""

    @abstractmethod
    def train(self, dataset: RegressionDataset, dataset_name: str | None = None) -> None:
        """
        Train the model using the provided dataset.

        Parameters
        ----------
        dataset : RegressionDataset
            Dataset to use for training the model.
        dataset_name : str | None, optional
            Name of the dataset (for tracking/logging purposes).
        """
        pass

    @abstractmethod
    def predict(self, features: Tensor) -> Tensor:
        """
        Predict targets for a design matrix.

        Parameters
        ----------
        features : Tensor
            Design matrix of shape (n, d).

        Returns
        -------
        Tensor
            Predictions of shape (n,).
        """
        pass

    @abstractmethod
    def evaluate(self, dataset: RegressionDataset) -> float:
        """
        Compute the mean squared error of the current weights on a dataset.

        Parameters
        ----------
        dataset : RegressionDataset
            Dataset to evaluate on.

        Returns
        -------
        float
            Mean squared error.
        """
        pass

    @property
    @abstractmethod
    def weights(self) -> Tensor:
        """Current weight vector of shape (d,)."""
        pass

    @property
    @abstractmethod
    def loss_history(self) -> list[float]:
        """Loss computed at every step of the last training run, in order."""
        pass
