"""Default element type and tolerances for the randomized checks."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np


DEFAULT_DTYPE = np.dtype(np.float64)


@dataclass(frozen=True)
class CheckSettings:
    """Tolerances used by the randomized operator checks."""

    eps: float = float(np.finfo(np.float64).eps)
    slack_exponent: float = 1.0 / 3.0

    @cached_property
    def slack(self) -> float:
        """Relative slack ε^p used when comparing inner products."""
        return self.eps ** self.slack_exponent

    @cached_property
    def imag_tolerance(self) -> float:
        """Relative size below which an imaginary part is negligible."""
        return float(np.sqrt(self.eps))


DEFAULT_CHECK_SETTINGS = CheckSettings()
