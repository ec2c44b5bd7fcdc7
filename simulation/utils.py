"""Helpers shared by the simulation models."""

import logging
import math

logger = logging.getLogger(__name__)


def sanitize_dt(dt: float, owner: str = "simulation") -> float:
    """Clamp a caller-supplied time step to a usable value.

    Negative or non-finite steps would integrate backward or poison the
    state with NaN, so they are treated as a zero-length step.

    Args:
        dt: Requested time step in seconds
        owner: Name used in the warning message

    Returns:
        dt if it is finite and non-negative, otherwise 0.0
    """
    if not math.isfinite(dt):
        logger.warning("%s: non-finite dt %r treated as 0", owner, dt)
        return 0.0
    if dt < 0.0:
        logger.warning("%s: negative dt %.6f clamped to 0", owner, dt)
        return 0.0
    return float(dt)
