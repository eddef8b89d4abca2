"""
Tensor Toolkit Interface.

The tensor operations the lessons rely on, behind an interface so the
use-cases never import a tensor library directly. Every method delegates to
the backing library; shape checks, broadcasting and dtype handling are the
library's own.
"""
from abc import ABC, abstractmethod
from typing import Any, Sequence

from src.domain.entities.tensor import Standardization, Tensor, TensorInfo


class TensorToolkit(ABC):
    """Abstract interface for the tensor operations used in the lessons."""

    @abstractmethod
    def tensor(self, data: Any, dtype: str | None = None) -> Tensor:
        """Create a tensor from a number or (nested) list; dtype None lets the library infer it."""
        pass

    @abstractmethod
    def iota(self, shape: Sequence[int], scale: float = 1.0) -> Tensor:
        """
        Create a float32 tensor counting 0, 1, 2, ... in row-major order, divided by `scale`.

        Parameters:
            shape (Sequence[int]): Shape of the result.
            scale (float): Divisor applied to every element.

        Returns:
            Tensor: Tensor of the requested shape.
        """
        pass

    @abstractmethod
    def describe(self, t: Tensor) -> TensorInfo:
        """Return shape, rank and dtype of `t`."""
        pass

    @abstractmethod
    def preview(self, t: Tensor, rows: int = 5, cols: int = 5) -> Tensor:
        """
        Return a small corner of `t` for inspection.

        Rank 0 tensors are returned as-is, rank 1 tensors are cut to `rows`
        entries, rank 2 tensors to the top-left `rows` x `cols` block, and
        higher ranks return the first entry along axis 0.
        """
        pass

    @abstractmethod
    def mean(self, t: Tensor, axes: Sequence[int] | None = None, keep_axes: bool = False) -> Tensor:
        """Mean over `axes` (all axes when None); `keep_axes` keeps reduced axes with size 1."""
        pass

    @abstractmethod
    def sum(self, t: Tensor, axes: Sequence[int] | None = None, keep_axes: bool = False) -> Tensor:
        """Sum over `axes` (all axes when None); `keep_axes` keeps reduced axes with size 1."""
        pass

    @abstractmethod
    def can_broadcast(self, a: Tensor, b: Tensor) -> bool:
        """Whether `a` and `b` have broadcast-compatible shapes."""
        pass

    @abstractmethod
    def add(self, a: Tensor, b: Tensor) -> Tensor:
        """
        Elementwise addition with broadcasting.

        Raises:
            ValueError: If the shapes of `a` and `b` are not broadcastable.
        """
        pass

    @abstractmethod
    def slice(self, t: Tensor, start: Sequence[int], lengths: Sequence[int]) -> Tensor:
        """Take `lengths[i]` entries along axis i starting at `start[i]`."""
        pass

    @abstractmethod
    def take(self, t: Tensor, indices: Sequence[int], axis: int = 0) -> Tensor:
        """Select entries at `indices` along `axis`."""
        pass

    @abstractmethod
    def squeeze(self, t: Tensor, axes: Sequence[int]) -> Tensor:
        """Remove the size-1 `axes`."""
        pass

    @abstractmethod
    def reshape(self, t: Tensor, shape: Sequence[int]) -> Tensor:
        pass

    @abstractmethod
    def transpose(self, t: Tensor) -> Tensor:
        pass

    @abstractmethod
    def standardize(self, x: Tensor, eps: float = 1e-6) -> Standardization:
        """
        Standardize every column of a (n, d) tensor to zero mean, unit variance.

        Statistics are kept with shape (1, d) so they broadcast over rows. `eps`
        is added to the variance before the square root so constant columns
        do not divide by zero.
        """
        pass

    @abstractmethod
    def add_bias_column(self, x: Tensor) -> Tensor:
        """Append a column of ones: (n, d) -> (n, d + 1)."""
        pass

    @abstractmethod
    def to_number(self, t: Tensor) -> float:
        """
        Extract the value of a scalar tensor.

        Raises:
            ValueError: If `t` is not a scalar.
        """
        pass

    @abstractmethod
    def to_list(self, t: Tensor) -> list[Any]:
        """Flatten `t` into a plain Python list."""
        pass
