"""
CLI entry point for lesson 02: the tensor playground.

Usage:
    python explore_tensors.py
    python explore_tensors.py -c config/lesson02.toml
    python explore_tensors.py --samples 50 --features 4 -v
"""
import argparse
import dataclasses
import logging

# Suppress TensorFlow logging before importing TF
from src.infrastructure.tensorflow.observability import suppress_tensorflow_logging

suppress_tensorflow_logging()

from src.domain.entities.results import ExplorationReport
from src.domain.use_cases.explore_tensors import ExploreTensors
from src.infrastructure.configuration import ExplorationConfiguration
from src.infrastructure.logging import setup_logging
from src.infrastructure.tensorflow.toolkit import TensorFlowToolkit

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Walk through tensor shapes, axes, broadcasting, slicing and standardization."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to TOML configuration file with an [exploration] table",
    )
    parser.add_argument(
        "--samples",
        dest="num_samples",
        type=int,
        help="Rows of the dataset used for standardization (default: 200)",
    )
    parser.add_argument(
        "--features",
        dest="num_features",
        type=int,
        help="Columns of the dataset used for standardization (default: 3)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log a preview of every tensor",
    )
    return parser.parse_args(argv)


def explore(config: ExplorationConfiguration) -> ExplorationReport:
    """
    Run the playground with the given configuration.

    Parameters
    ----------
    config : ExplorationConfiguration
        Sizes and preview limits.

    Returns
    -------
    ExplorationReport
        Shapes, dtypes and values collected along the way.
    """
    use_case = ExploreTensors(
        toolkit=TensorFlowToolkit(),
        num_samples=config.num_samples,
        num_features=config.num_features,
        broadcast_rows=config.broadcast_rows,
        input_scale=config.input_scale,
        eps=config.eps,
        preview_rows=config.preview_rows,
        preview_cols=config.preview_cols,
    )
    return use_case.run()


def main(argv=None):
    """
    Main entry point for lesson 02.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.
    """
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = ExplorationConfiguration.load(args.config) if args.config else ExplorationConfiguration()
    overrides = {
        name: getattr(args, name)
        for name in ("num_samples", "num_features")
        if getattr(args, name) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)

    return explore(config)


if __name__ == "__main__":
    main()
