"""Sampling decision for high-frequency metrics."""

import random


def should_send(sample_rate: float, rng: random.Random | None = None) -> bool:
    """Decide whether a metric survives sampling.

    Rates at or above 1.0 always send without drawing. Below that, one
    uniform draw in [0, 1) is taken and the metric is dropped when the draw
    exceeds the rate, so a rate at or below zero drops (practically) always.

    Args:
        sample_rate: Probability of sending.
        rng: Random source; the module-level generator when omitted.

    Returns:
        True if the metric should be sent.
    """
    if sample_rate >= 1.0:
        return True
    draw = rng.random() if rng is not None else random.random()  # noqa: S311
    return not draw > sample_rate
