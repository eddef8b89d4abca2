"""
Train Linear Regression Use-Case.

This module provides the lesson 01 use-case: fit `y_hat = X . w` to a
synthetic dataset by full-batch gradient descent on the mean squared error.
"""
import logging

from src.domain.entities.dataset import RegressionDataset
from src.domain.entities.results import TrainingResult
from src.domain.interfaces.dataset_loader import DatasetLoader
from src.domain.interfaces.model import Model
from src.domain.interfaces.tensor_toolkit import TensorToolkit

logger = logging.getLogger(__name__)


class TrainLinearRegression:
    """
    Use-case for training a linear regression model on synthetic data.

    This use-case orchestrates the workflow of:
    1. Generating a dataset from known weights
    2. Optionally standardizing the features and appending a bias column
    3. Training the model
    4. Reporting learned weights next to the true ones

    Attributes
    ----------
    dataset_loader : DatasetLoader
        Component responsible for building the dataset.
    model : Model
        Model to train.
    toolkit : TensorToolkit
        Tensor operations used for feature preparation.
    num_samples : int
        Number of samples to generate.
    true_weights : list[float]
        Weights used to generate the targets.
    offset : float
        Constant added to every target.
    standardize : bool
        Whether to standardize the features before training.
    fit_bias : bool
        Whether to append a ones column so the model can learn the offset.
    dataset_name : str
        Name used for tracking and logging.
    """

    def __init__(
        self,
        dataset_loader: DatasetLoader,
        model: Model,
        toolkit: TensorToolkit,
        num_samples: int,
        true_weights: list[float],
        offset: float = 0.0,
        standardize: bool = False,
        fit_bias: bool = False,
        dataset_name: str = "synthetic-linear",
        eps: float = 1e-6,
    ) -> None:
        self.dataset_loader = dataset_loader
        self.model = model
        self.toolkit = toolkit
        self.num_samples = num_samples
        self.true_weights = list(true_weights)
        self.offset = offset
        self.standardize = standardize
        self.fit_bias = fit_bias
        self.dataset_name = dataset_name
        self.eps = eps

    def prepare(self, dataset: RegressionDataset) -> RegressionDataset:
        """
        Apply the configured feature preparation to a dataset.

        Parameters
        ----------
        dataset : RegressionDataset
            Raw dataset.

        Returns
        -------
        RegressionDataset
            Dataset with standardized and/or bias-augmented features. Targets
            are left untouched.
        """
        features = dataset.features
        if self.standardize:
            logger.info(f"Standardizing features (eps={self.eps:g})...")
            features = self.toolkit.standardize(features, eps=self.eps).standardized
        if self.fit_bias:
            logger.info("Appending bias column...")
            features = self.toolkit.add_bias_column(features)

        if features is dataset.features:
            return dataset
        return RegressionDataset(
            features=features,
            targets=dataset.targets,
            true_weights=dataset.true_weights,
            offset=dataset.offset,
        )

    def expected_weights(self) -> list[float] | None:
        """
        Weights the model should recover on the prepared features.

        Standardized features no longer relate to the generating weights, so
        there is nothing to compare against in that case.
        """
        if self.standardize:
            return None
        if self.fit_bias:
            return self.true_weights + [self.offset]
        return list(self.true_weights)

    def run(self) -> TrainingResult:
        """
        Execute the training workflow.

        Returns
        -------
        TrainingResult
            Learned weights, expected weights, final loss and per-step losses.
        """
        logger.info(f"Generating {self.dataset_name} dataset...")
        dataset = self.dataset_loader.load(self.num_samples, self.true_weights, self.offset)
        logger.info(
            f"Loaded {len(dataset)} samples with {dataset.num_features} features."
        )

        dataset = self.prepare(dataset)

        logger.info(f"Training model on {self.dataset_name}...")
        self.model.train(dataset, dataset_name=self.dataset_name)
        logger.info("Training completed.")

        weights = self.toolkit.to_list(self.model.weights)
        history = list(self.model.loss_history)
        # loss measured before the last update, as reported during training
        final_loss = history[-1]

        result = TrainingResult(
            weights=[float(w) for w in weights],
            true_weights=self.expected_weights(),
            final_loss=final_loss,
            loss_history=history,
            steps=len(history),
        )
        logger.info(f"Learned w:  {result.weights}")
        logger.info(f"True w:     {result.true_weights}")
        logger.info(f"Final loss: {result.final_loss:.6f}")
        return result
