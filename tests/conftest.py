"""Pytest configuration and shared fixtures."""
import pytest
from fixtures.dummy_model import DummyModel

from src.infrastructure.configuration import TrainingConfiguration
from src.infrastructure.tensorflow.observability import (
    SilentTracker,
    suppress_tensorflow_logging,
)

suppress_tensorflow_logging()


@pytest.fixture
def dummy_model():
    """
    Provide a DummyModel instance for tests.

    Returns:
        DummyModel: A new DummyModel instance.
    """
    return DummyModel()


@pytest.fixture
def toolkit():
    """Provide a TensorFlow-backed TensorToolkit."""
    from src.infrastructure.tensorflow.toolkit import TensorFlowToolkit

    return TensorFlowToolkit()


@pytest.fixture
def silent_tracker():
    return SilentTracker()


@pytest.fixture
def small_training_config():
    """
    Provide a lightweight training configuration for tests.

    Returns:
        TrainingConfiguration: 20 samples, 3 features, 30 steps, no progress bar.
    """
    return TrainingConfiguration(
        num_samples=20,
        steps=30,
        log_every=10,
        show_progress=False,
    )
