"""Result entities returned by the lesson use-cases."""
from dataclasses import dataclass, field
from typing import Any

from src.domain.entities.tensor import TensorInfo


@dataclass
class TrainingResult:
    """Outcome of a gradient-descent training run."""

    weights: list[float]
    true_weights: list[float] | None
    final_loss: float
    loss_history: list[float] = field(default_factory=list)
    steps: int = 0


@dataclass
class ExplorationReport:
    """
    Everything the tensor playground produced.

    `tensors` maps a label to the TensorInfo of the tensor it names, in the
    order the tensors were created. `values` keeps flattened contents of small
    results worth looking at (reductions, selected rows).
    """

    tensors: dict[str, TensorInfo] = field(default_factory=dict)
    broadcast_checks: dict[str, bool] = field(default_factory=dict)
    values: dict[str, list[Any]] = field(default_factory=dict)

    def shape_of(self, label: str) -> tuple[int, ...]:
        return self.tensors[label].shape
