"""
TensorFlow Linear Regression Implementation.

This module implements the lesson 01 model, `y_hat = X . w` trained with
full-batch gradient descent on the mean squared error, exposed through the
domain `Model` interface.

Responsibilities
----------------
- Owns the weight vector (a plain `tf.Tensor`, replaced at every step)
- Computes loss and gradient with `tf.GradientTape`
- Optionally compiles the update step with XLA (`tf.function(jit_compile=True)`)
- Reports every step to an optional `TrainingTracker`
"""
from __future__ import annotations

from typing import Optional

import tensorflow as tf

from src.domain.entities.dataset import RegressionDataset
from src.domain.interfaces.model import Model
from src.domain.interfaces.training_tracker import TrainingTracker


class TensorFlowLinearRegression(Model):
    """
    Concrete TensorFlow implementation of the domain `Model` interface.

    Weights start at zero. They are created at construction when
    `num_features` is given, otherwise on the first call to `train`. Later
    calls to `train` continue from the current weights.
    """

    def __init__(
            self,
            num_features: Optional[int] = None,
            learning_rate: float = 0.005,
            steps: int = 200,
            jit_compile: bool = False,
            tracker: Optional[TrainingTracker] = None,
            dtype: tf.DType = tf.float32,
    ) -> None:
        """
        Initialize the TensorFlow linear regression model.

        Parameters
        ----------
        num_features : int, optional
            Length of the weight vector. Inferred from the first dataset when None.
        learning_rate : float, optional
            Gradient-descent step size. Default is 0.005.
        steps : int, optional
            Number of update steps per call to `train`. Default is 200.
        jit_compile : bool, optional
            Compile the update step with XLA. Default is False.
        tracker : TrainingTracker, optional
            Optional tracker for training progress.
        dtype : tf.DType, optional
            Dtype of weights and inputs. Default is tf.float32.

        Raises
        ------
        ValueError
            If `steps` is less than 1.
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        self.learning_rate = learning_rate
        self.steps = steps
        self.jit_compile = jit_compile
        self.tracker = tracker
        self.dtype = dtype

        self._weights: tf.Tensor | None = None
        if num_features is not None:
            self._weights = tf.zeros((num_features,), dtype=dtype)
        self._loss_history: list[float] = []

        if jit_compile:
            self._step_fn = tf.function(self._train_step, jit_compile=True)
        else:
            self._step_fn = self._train_step

    # -------------------------------------------------------------------------
    # Public API (domain interface)
    # -------------------------------------------------------------------------

    @property
    def weights(self) -> tf.Tensor:
        if self._weights is None:
            raise RuntimeError("Model has no weights yet: train it or pass num_features.")
        return self._weights

    @property
    def loss_history(self) -> list[float]:
        return list(self._loss_history)

    def train(self, dataset: RegressionDataset, dataset_name: str | None = None) -> None:
        """
        Run `steps` gradient-descent updates on the full dataset.

        Parameters
        ----------
        dataset : RegressionDataset
            Training data.
        dataset_name : str | None, optional
            Name of the dataset (for tracking/logging purposes).

        Raises
        ------
        ValueError
            If existing weights do not match the dataset's feature count.
        """
        if self._weights is None:
            self._weights = tf.zeros((dataset.num_features,), dtype=self.dtype)
        elif self._weights.shape[0] != dataset.num_features:
            raise ValueError(
                f"Dataset has {dataset.num_features} features but the model "
                f"has {self._weights.shape[0]} weights."
            )

        features = tf.cast(dataset.features, self.dtype)
        targets = tf.cast(dataset.targets, self.dtype)
        learning_rate = tf.constant(self.learning_rate, dtype=self.dtype)

        if self.tracker is not None:
            self.tracker.on_training_start(total_steps=self.steps, dataset_name=dataset_name)

        self._loss_history = []
        weights = self._weights
        for step in range(1, self.steps + 1):
            weights, loss = self._step_fn(features, targets, weights, learning_rate)
            loss_value = float(loss)
            self._loss_history.append(loss_value)

            if self.tracker is not None:
                self.tracker.on_step_end(step, loss_value)

        self._weights = weights

        if self.tracker is not None:
            self.tracker.on_training_end(self._loss_history[-1])

    def predict(self, features: tf.Tensor) -> tf.Tensor:
        """
        Compute `features . weights`.

        Parameters
        ----------
        features : tf.Tensor
            Design matrix of shape (n, d).

        Returns
        -------
        tf.Tensor
            Predictions of shape (n,).
        """
        return tf.linalg.matvec(tf.cast(features, self.dtype), self.weights)

    def evaluate(self, dataset: RegressionDataset) -> float:
        """
        Mean squared error of the current weights on `dataset`.

        After `train` this is the loss of the updated weights, one step past
        the last entry of `loss_history`.
        """
        loss = self.loss(
            tf.cast(dataset.features, self.dtype),
            tf.cast(dataset.targets, self.dtype),
            self.weights,
        )
        return float(loss)

    @staticmethod
    def loss(features: tf.Tensor, targets: tf.Tensor, weights: tf.Tensor) -> tf.Tensor:
        """
        Mean squared error of a linear model.

        Parameters
        ----------
        features : tf.Tensor
            Design matrix, shape (n, d).
        targets : tf.Tensor
            Targets, shape (n,).
        weights : tf.Tensor
            Weights, shape (d,).

        Returns
        -------
        tf.Tensor
            Scalar loss.
        """
        predictions = tf.linalg.matvec(features, weights)
        return tf.reduce_mean(tf.pow(predictions - targets, 2))

    # -------------------------------------------------------------------------
    # Internal helper: one update step
    # -------------------------------------------------------------------------

    def _train_step(
            self,
            features: tf.Tensor,
            targets: tf.Tensor,
            weights: tf.Tensor,
            learning_rate: tf.Tensor,
    ) -> tuple[tf.Tensor, tf.Tensor]:
        """
        Perform one gradient-descent step.

        Returns
        -------
        new_weights : tf.Tensor
            `weights - learning_rate * gradient`.
        loss : tf.Tensor
            Scalar loss at `weights`, before the update.
        """
        with tf.GradientTape() as tape:
            tape.watch(weights)
            loss = self.loss(features, targets, weights)

        gradient = tape.gradient(loss, weights)
        return weights - learning_rate * gradient, loss
