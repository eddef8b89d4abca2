import tensorflow as tf

from src.domain.entities.dataset import RegressionDataset
from src.domain.interfaces.dataset_loader import DatasetLoader


class SyntheticLinearDatasetLoader(DatasetLoader):
    """
    Deterministic linear regression data built with TensorFlow.

    Features count up row by row, `x[i, j] = (i * d + j) / input_scale`, and
    targets follow `y = x . true_weights + offset` exactly (no noise), so a
    run is reproducible without seeding anything.

    Parameters
    ----------
    input_scale : float, optional
        Divisor applied to the counting features. Default is 50.0.
    dtype : tf.DType, optional
        Dtype of features and targets. Default is tf.float32.
    """

    def __init__(self, input_scale: float = 50.0, dtype: tf.DType = tf.float32) -> None:
        if input_scale <= 0:
            raise ValueError(f"input_scale must be positive, got {input_scale}")
        self.input_scale = input_scale
        self.dtype = dtype

    def load(self, num_samples: int, true_weights: list[float], offset: float) -> RegressionDataset:
        """
        Build the dataset.

        Parameters:
            num_samples (int): Number of rows.
            true_weights (list[float]): Generating weights; their count is the number of features.
            offset (float): Constant added to every target.

        Returns:
            RegressionDataset: features (num_samples, d), targets (num_samples,).

        Raises:
            ValueError: If `num_samples` is below 1 or `true_weights` is empty.
        """
        if num_samples < 1:
            raise ValueError(f"num_samples must be at least 1, got {num_samples}")
        if len(true_weights) == 0:
            raise ValueError("true_weights must contain at least one value")

        num_features = len(true_weights)
        x = tf.reshape(
            tf.range(num_samples * num_features, dtype=self.dtype),
            (num_samples, num_features),
        )
        x = tf.divide(x, tf.constant(self.input_scale, dtype=self.dtype))

        true_w = tf.constant(true_weights, dtype=self.dtype)
        y = tf.add(tf.linalg.matvec(x, true_w), tf.constant(offset, dtype=self.dtype))

        return RegressionDataset(features=x, targets=y, true_weights=true_w, offset=offset)
