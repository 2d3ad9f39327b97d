# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fixed-point refinement shared by the transit and rise/set solvers.

x_{k+1} = x_k + correction(x_k), stopping when |correction| ≤ tolerance or
after max_iterations corrections. Reaching the cap is not an error: the last
estimate is returned with converged=False.
"""
import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_DAYS: float = 1e-4  # ≈ 8.6 s
DEFAULT_MAX_ITERATIONS: int = 10


@dataclass(frozen=True)
class Refinement:
    """Outcome of a fixed-point refinement."""
    value: float
    iterations: int
    converged: bool


def refine_fixed_point(
    initial: float,
    correction: Callable[[float], float],
    tolerance: float = DEFAULT_TOLERANCE_DAYS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Refinement:
    """Iterate an additive correction until it falls within tolerance.

    Args:
        initial: Starting estimate.
        correction: Maps the current estimate to the step to add to it.
        tolerance: Stop once |step| ≤ tolerance.
        max_iterations: Upper bound on the number of corrections applied.

    Returns:
        Refinement with the last estimate, the number of corrections applied,
        and whether the tolerance was met.

    Raises:
        ValueError: If max_iterations < 1 or tolerance is negative.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
    if tolerance < 0.0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    value = initial
    step = 0.0
    for iteration in range(1, max_iterations + 1):
        step = correction(value)
        value += step
        if abs(step) <= tolerance:
            return Refinement(value=value, iterations=iteration, converged=True)

    logger.debug(
        "Refinement stopped after %d iterations without converging "
        "(last step %.3e, tolerance %.3e).",
        max_iterations, step, tolerance,
    )
    return Refinement(value=value, iterations=max_iterations, converged=False)
