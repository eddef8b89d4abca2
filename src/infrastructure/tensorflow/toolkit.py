"""
TensorFlow implementation of the `TensorToolkit` interface.

Thin wrappers around TensorFlow ops. Broadcasting, shape inference and dtype
promotion rules are TensorFlow's; this module only adapts argument
conventions (axes lists, keep_axes, start/length slices) and checks inputs
up front so failures surface as the ValueErrors the interface documents.
"""
from __future__ import annotations

from typing import Any, Sequence

import tensorflow as tf

from src.domain.entities.tensor import Standardization, TensorInfo
from src.domain.interfaces.tensor_toolkit import TensorToolkit


def _shape_of(t: tf.Tensor) -> tuple[int, ...]:
    return tuple(int(dim) for dim in t.shape)


class TensorFlowToolkit(TensorToolkit):
    """
    Tensor operations backed by TensorFlow eager tensors.

    Parameters
    ----------
    dtype : tf.DType, optional
        Floating dtype used by `iota`, `standardize` and `add_bias_column`.
        Default is tf.float32.
    """

    def __init__(self, dtype: tf.DType = tf.float32) -> None:
        self.dtype = dtype

    def tensor(self, data: Any, dtype: str | None = None) -> tf.Tensor:
        if dtype is None:
            return tf.constant(data)
        return tf.constant(data, dtype=tf.as_dtype(dtype))

    def iota(self, shape: Sequence[int], scale: float = 1.0) -> tf.Tensor:
        shape = tuple(shape)
        size = 1
        for dim in shape:
            size *= dim
        counts = tf.reshape(tf.range(size, dtype=self.dtype), shape)
        if scale != 1.0:
            counts = tf.divide(counts, tf.constant(scale, dtype=self.dtype))
        return counts

    def describe(self, t: tf.Tensor) -> TensorInfo:
        return TensorInfo(shape=_shape_of(t), rank=len(t.shape), dtype=t.dtype.name)

    def preview(self, t: tf.Tensor, rows: int = 5, cols: int = 5) -> tf.Tensor:
        rank = len(t.shape)
        if rank == 0:
            return t
        if rank == 1:
            return t[: min(rows, t.shape[0])]
        if rank == 2:
            return t[: min(rows, t.shape[0]), : min(cols, t.shape[1])]
        return tf.gather(t, [0], axis=0)

    def mean(self, t: tf.Tensor, axes: Sequence[int] | None = None, keep_axes: bool = False) -> tf.Tensor:
        return tf.reduce_mean(t, axis=None if axes is None else list(axes), keepdims=keep_axes)

    def sum(self, t: tf.Tensor, axes: Sequence[int] | None = None, keep_axes: bool = False) -> tf.Tensor:
        return tf.reduce_sum(t, axis=None if axes is None else list(axes), keepdims=keep_axes)

    def can_broadcast(self, a: tf.Tensor, b: tf.Tensor) -> bool:
        try:
            tf.broadcast_static_shape(tf.TensorShape(a.shape), tf.TensorShape(b.shape))
        except ValueError:
            return False
        return True

    def add(self, a: tf.Tensor, b: tf.Tensor) -> tf.Tensor:
        if not self.can_broadcast(a, b):
            raise ValueError(
                f"Cannot broadcast shapes {_shape_of(a)} and {_shape_of(b)}: "
                f"trailing dimensions must match or be 1."
            )
        return tf.add(a, b)

    def slice(self, t: tf.Tensor, start: Sequence[int], lengths: Sequence[int]) -> tf.Tensor:
        if len(start) != len(t.shape) or len(lengths) != len(t.shape):
            raise ValueError(
                f"start and lengths must have one entry per axis of a rank {len(t.shape)} tensor, "
                f"got start={list(start)} lengths={list(lengths)}"
            )
        for axis, (begin, size) in enumerate(zip(start, lengths)):
            if begin < 0 or size < 0 or begin + size > t.shape[axis]:
                raise ValueError(
                    f"Slice [{begin}, {begin + size}) is out of bounds for axis {axis} "
                    f"of size {t.shape[axis]}"
                )
        return tf.slice(t, list(start), list(lengths))

    def take(self, t: tf.Tensor, indices: Sequence[int], axis: int = 0) -> tf.Tensor:
        return tf.gather(t, tf.constant(list(indices)), axis=axis)

    def squeeze(self, t: tf.Tensor, axes: Sequence[int]) -> tf.Tensor:
        return tf.squeeze(t, axis=list(axes))

    def reshape(self, t: tf.Tensor, shape: Sequence[int]) -> tf.Tensor:
        return tf.reshape(t, list(shape))

    def transpose(self, t: tf.Tensor) -> tf.Tensor:
        return tf.transpose(t)

    def standardize(self, x: tf.Tensor, eps: float = 1e-6) -> Standardization:
        if len(x.shape) != 2:
            raise ValueError(f"standardize expects a (samples, features) tensor, got shape {_shape_of(x)}")
        x = tf.cast(x, self.dtype)
        mean = tf.reduce_mean(x, axis=[0], keepdims=True)
        centered = tf.subtract(x, mean)
        var = tf.reduce_mean(tf.pow(centered, 2), axis=[0], keepdims=True)
        std = tf.sqrt(tf.add(var, eps))
        return Standardization(
            standardized=tf.divide(centered, std),
            mean=mean,
            std=std,
        )

    def add_bias_column(self, x: tf.Tensor) -> tf.Tensor:
        if len(x.shape) != 2:
            raise ValueError(f"add_bias_column expects a (samples, features) tensor, got shape {_shape_of(x)}")
        ones = tf.ones((x.shape[0], 1), dtype=x.dtype)
        return tf.concat([x, ones], axis=1)

    def to_number(self, t: tf.Tensor) -> float:
        if len(t.shape) != 0:
            raise ValueError(
                f"Only scalar tensors can be converted to a number, got shape {_shape_of(t)}"
            )
        return t.numpy().item()

    def to_list(self, t: tf.Tensor) -> list[Any]:
        return tf.reshape(t, [-1]).numpy().tolist()
