"""
CLI entry point for lesson 01: linear regression trained by gradient descent.

Usage with config file:
    python train_linear_regression.py -c config/lesson01.toml

Usage with command-line args (override the config file when both are given):
    python train_linear_regression.py --steps 400 --learning-rate 0.004
    python train_linear_regression.py --standardize --fit-bias --learning-rate 0.1
"""
import argparse
import dataclasses
import logging

# Suppress TensorFlow logging before importing TF
from src.infrastructure.tensorflow.observability import (
    ConsoleTracker,
    suppress_tensorflow_logging,
)

suppress_tensorflow_logging()

from src.domain.entities.results import TrainingResult
from src.domain.use_cases.train_linear_regression import TrainLinearRegression
from src.infrastructure.configuration import TrainingConfiguration
from src.infrastructure.logging import setup_logging
from src.infrastructure.tensorflow.dataset_loader import SyntheticLinearDatasetLoader
from src.infrastructure.tensorflow.linear_regression import TensorFlowLinearRegression
from src.infrastructure.tensorflow.toolkit import TensorFlowToolkit

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments. Options left unset are None.
    """
    parser = argparse.ArgumentParser(
        description="Train a linear regression model with gradient descent on synthetic data."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to TOML configuration file with a [training] table",
    )
    parser.add_argument(
        "--samples",
        dest="num_samples",
        type=int,
        help="Number of synthetic samples (default: 200)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        help="Number of gradient-descent steps (default: 200)",
    )
    parser.add_argument(
        "--learning-rate",
        type=float,
        help="Learning rate (default: 0.005)",
    )
    parser.add_argument(
        "--log-every",
        type=int,
        help="Print the loss every N steps (default: 50)",
    )
    parser.add_argument(
        "--standardize",
        action="store_true",
        default=None,
        help="Standardize features to zero mean and unit variance before training",
    )
    parser.add_argument(
        "--fit-bias",
        action="store_true",
        default=None,
        help="Append a bias column so the model can learn the target offset",
    )
    parser.add_argument(
        "--jit",
        dest="jit_compile",
        action="store_true",
        default=None,
        help="Compile the update step with XLA",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the progress bar",
    )
    return parser.parse_args(argv)


def build_configuration(args: argparse.Namespace) -> TrainingConfiguration:
    """
    Combine the optional config file with command-line overrides.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments.

    Returns
    -------
    TrainingConfiguration
        Configuration from the file (or defaults), with every option given on
        the command line taking precedence.
    """
    config = TrainingConfiguration.load(args.config) if args.config else TrainingConfiguration()

    overrides = {
        name: getattr(args, name)
        for name in ("num_samples", "steps", "learning_rate", "log_every", "standardize", "fit_bias", "jit_compile")
        if getattr(args, name) is not None
    }
    if args.quiet:
        overrides["show_progress"] = False
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def train(config: TrainingConfiguration) -> TrainingResult:
    """
    Train a model with the given configuration.

    Parameters
    ----------
    config : TrainingConfiguration
        Configuration for the training run.

    Returns
    -------
    TrainingResult
        Learned weights, expected weights and losses.
    """
    # Instantiate dependencies
    toolkit = TensorFlowToolkit()
    dataset_loader = SyntheticLinearDatasetLoader(input_scale=config.input_scale)
    tracker = ConsoleTracker(log_every=config.log_every, show_progress=config.show_progress)
    model = TensorFlowLinearRegression(
        learning_rate=config.learning_rate,
        steps=config.steps,
        jit_compile=config.jit_compile,
        tracker=tracker,
    )

    # Create and run use-case
    use_case = TrainLinearRegression(
        dataset_loader=dataset_loader,
        model=model,
        toolkit=toolkit,
        num_samples=config.num_samples,
        true_weights=config.true_weights,
        offset=config.offset,
        standardize=config.standardize,
        fit_bias=config.fit_bias,
    )
    return use_case.run()


def main(argv=None):
    """
    Main entry point for lesson 01.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.
    """
    setup_logging()
    args = parse_args(argv)
    config = build_configuration(args)
    logger.info(
        f"Training for {config.steps} steps at learning rate {config.learning_rate} "
        f"on {config.num_samples} samples"
    )
    return train(config)


if __name__ == "__main__":
    main()
