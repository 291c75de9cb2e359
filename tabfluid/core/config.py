"""Model configuration and its JSON persistence.

The settings are fixed once a model is constructed; change them by building
a new model from a new configuration.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from tabfluid.core.errors import TableFluidError
from tabfluid.utils.constants import (
    SECANT_MAX_ITER,
    SECANT_PERTURBATION,
    SECANT_TOL,
    SECANT_ZERO_STEP,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelConfig:
    """Settings of a table fluid model."""

    compute_entropy: bool = False
    tolerance: float = SECANT_TOL
    max_iterations: int = SECANT_MAX_ITER
    perturbation: float = SECANT_PERTURBATION
    zero_step: float = SECANT_ZERO_STEP
    strict: bool = False  # raise ConvergenceError instead of storing a non-converged state

    def solver_options(self) -> dict[str, Any]:
        """Keyword arguments for :func:`tabfluid.core.rootfind.secant_root`."""
        return {
            "tol": self.tolerance,
            "max_iter": self.max_iterations,
            "perturbation": self.perturbation,
            "zero_step": self.zero_step,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModelConfig:
        """Build from a plain dictionary.

        Raises:
            TableFluidError: On keys that are not configuration fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise TableFluidError(f"Unknown configuration keys: {unknown}")
        return cls(**data)


def save_config_json(config: ModelConfig, path: str | Path) -> None:
    """Save a model configuration to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(asdict(config), f, indent=2)
    logger.info("Saved model config to %s", path)


def load_config_json(path: str | Path) -> ModelConfig:
    """Load a model configuration from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    config = ModelConfig.from_dict(data)
    logger.info("Loaded model config from %s", path)
    return config
