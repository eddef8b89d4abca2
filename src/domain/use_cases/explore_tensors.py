"""
Explore Tensors Use-Case.

Lesson 02: shapes and dtypes, axes, broadcasting, slicing and selecting,
reshape and transpose, reductions, and the standardization + bias column
pattern used to prepare features for linear models.

Each section builds a few tensors through a `TensorToolkit` and records
their shape, rank and dtype in an `ExplorationReport`.
"""
import logging

from src.domain.entities.results import ExplorationReport
from src.domain.entities.tensor import Tensor
from src.domain.interfaces.tensor_toolkit import TensorToolkit

logger = logging.getLogger(__name__)


class ExploreTensors:
    """
    Use-case walking through the tensor playground sections.

    Parameters
    ----------
    toolkit : TensorToolkit
        Tensor operations to exercise.
    num_samples : int
        Rows of the dataset used in the standardization section.
    num_features : int
        Columns of the dataset used in the standardization section.
    broadcast_rows : int
        Rows of the matrix used in the broadcasting section.
    input_scale : float
        Divisor applied to the standardization dataset.
    eps : float
        Added to the variance before taking the square root.
    preview_rows : int
        Rows shown in DEBUG previews.
    preview_cols : int
        Columns shown in DEBUG previews.
    """

    SECTIONS = (
        "creation",
        "dtypes",
        "axes",
        "broadcasting",
        "slicing",
        "reshape",
        "reductions",
        "standardization",
    )

    def __init__(
        self,
        toolkit: TensorToolkit,
        num_samples: int = 200,
        num_features: int = 3,
        broadcast_rows: int = 6,
        input_scale: float = 50.0,
        eps: float = 1e-6,
        preview_rows: int = 5,
        preview_cols: int = 5,
    ) -> None:
        if input_scale <= 0:
            raise ValueError(f"input_scale must be positive, got {input_scale}")
        self.toolkit = toolkit
        self.num_samples = num_samples
        self.num_features = num_features
        self.broadcast_rows = broadcast_rows
        self.input_scale = input_scale
        self.eps = eps
        self.preview_rows = preview_rows
        self.preview_cols = preview_cols
        self.report = ExplorationReport()

    def run(self) -> ExplorationReport:
        """
        Run every section in order.

        Returns
        -------
        ExplorationReport
            Shapes and dtypes of every tensor built, plus broadcast checks and
            small values.
        """
        self.report = ExplorationReport()
        for section in self.SECTIONS:
            logger.info(f"--- {section} ---")
            getattr(self, f"_{section}")()
        logger.info(f"Exploration complete: {len(self.report.tensors)} tensors inspected.")
        return self.report

    def _record(self, label: str, t: Tensor, keep_values: bool = False) -> Tensor:
        info = self.toolkit.describe(t)
        self.report.tensors[label] = info
        logger.info(f"{label}: {info}")
        if logger.isEnabledFor(logging.DEBUG):
            preview = self.toolkit.preview(t, self.preview_rows, self.preview_cols)
            logger.debug(f"{label} (preview): {self.toolkit.to_list(preview)}")
        if keep_values:
            self.report.values[label] = self.toolkit.to_list(t)
        return t

    def _creation(self) -> None:
        tk = self.toolkit
        self._record("scalar", tk.tensor(3.14, dtype="float32"))
        self._record("vector", tk.tensor([1, 2, 3, 4], dtype="float32"))
        self._record("matrix", tk.iota((2, 3)))

    def _dtypes(self) -> None:
        tk = self.toolkit
        self._record("ints", tk.tensor([1, 2, 3]))
        self._record("floats", tk.tensor([1, 2, 3], dtype="float32"))

    def _axes(self) -> None:
        tk = self.toolkit
        x = self._record("axes_x", tk.iota((4, 3)))
        self._record("col_means", tk.mean(x, axes=[0]), keep_values=True)
        self._record("row_means", tk.mean(x, axes=[1]), keep_values=True)
        self._record("col_means_keep", tk.mean(x, axes=[0], keep_axes=True))

    def _broadcasting(self) -> None:
        tk = self.toolkit
        n = self.broadcast_rows
        xb = self._record("xb", tk.iota((n, 3), scale=10.0))
        shift = self._record("shift", tk.tensor([1.0, 10.0, 100.0], dtype="float32"))
        self._record("xb_shifted", tk.add(xb, shift))

        column_length = self._record("bad", tk.iota((n,)))
        self.report.broadcast_checks["matrix+row_vector"] = tk.can_broadcast(xb, shift)
        self.report.broadcast_checks["matrix+column_length_vector"] = tk.can_broadcast(
            xb, column_length
        )
        for name, ok in self.report.broadcast_checks.items():
            logger.info(f"broadcast {name}: {'compatible' if ok else 'incompatible'}")

    def _slicing(self) -> None:
        tk = self.toolkit
        big = self._record("big", tk.iota((10, 5), scale=10.0))
        self._record("first3_rows", tk.slice(big, [0, 0], [3, 5]))
        col2 = self._record("col2", tk.slice(big, [0, 2], [10, 1]))
        self._record("col2_vec", tk.squeeze(col2, axes=[1]), keep_values=True)
        self._record("picked_rows", tk.take(big, [0, 3, 9], axis=0), keep_values=True)

    def _reshape(self) -> None:
        tk = self.toolkit
        a = self._record("a", tk.iota((2, 6)))
        a_reshaped = self._record("a_reshaped", tk.reshape(a, (3, 4)))
        self._record("a_t", tk.transpose(a_reshaped))

    def _reductions(self) -> None:
        tk = self.toolkit
        r = self._record("r", tk.iota((4, 3)))
        self._record("sum_all", tk.sum(r), keep_values=True)
        self._record("sum_cols", tk.sum(r, axes=[0]), keep_values=True)
        self._record("sum_rows", tk.sum(r, axes=[1]), keep_values=True)

    def _standardization(self) -> None:
        tk = self.toolkit
        n, d = self.num_samples, self.num_features
        x = self._record("dataset", tk.iota((n, d), scale=self.input_scale))

        result = tk.standardize(x, eps=self.eps)
        self._record("mean", result.mean, keep_values=True)
        self._record("std", result.std, keep_values=True)
        self._record("x_std", result.standardized)

        x_bias = tk.add_bias_column(x)
        self._record("ones", tk.slice(x_bias, [0, d], [n, 1]))
        self._record("x_bias", x_bias)
