"""Tensor entity - framework-independent abstraction."""
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Tensor(Protocol):
    """Framework-independent tensor/array abstraction."""

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Get the tensor's shape.

        Returns:
            shape (tuple[int, ...]): Tuple of integers representing the size of each dimension.
        """
        ...


@dataclass(frozen=True)
class TensorInfo:
    """Shape, rank and dtype of a tensor, detached from any backend."""

    shape: tuple[int, ...]
    rank: int
    dtype: str

    def __str__(self) -> str:
        return f"shape={self.shape} rank={self.rank} dtype={self.dtype}"


@dataclass
class Standardization:
    """Result of per-column standardization: (x - mean) / std."""

    standardized: Tensor
    mean: Tensor
    std: Tensor
