"""Dataset entity - framework-independent abstraction."""
from dataclasses import dataclass

from src.domain.entities.tensor import Tensor


@dataclass
class RegressionDataset:
    """
    Features/targets pair for a linear regression problem.

    Attributes
    ----------
    features : Tensor
        Design matrix of shape (n, d).
    targets : Tensor
        Target vector of shape (n,).
    true_weights : Tensor | None
        Weights used to generate the targets, when known.
    offset : float
        Constant added to every target when the data was generated.
    """

    features: Tensor
    targets: Tensor
    true_weights: Tensor | None = None
    offset: float = 0.0

    def __post_init__(self):
        if len(self.features.shape) != 2:
            raise ValueError(
                f"Features must have rank 2 (samples, features), got shape {tuple(self.features.shape)}"
            )
        if len(self.targets.shape) != 1:
            raise ValueError(
                f"Targets must have rank 1 (samples,), got shape {tuple(self.targets.shape)}"
            )
        if self.features.shape[0] != self.targets.shape[0]:
            raise ValueError(
                f"Features have {self.features.shape[0]} rows but targets have "
                f"{self.targets.shape[0]} entries."
            )

    def __len__(self) -> int:
        return int(self.features.shape[0])

    @property
    def num_features(self) -> int:
        return int(self.features.shape[1])
