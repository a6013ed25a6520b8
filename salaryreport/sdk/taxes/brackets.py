"""Bracket table evaluation shared by the income tax and income deduction schedules.

A bracket table is an ordered list of bands:

    (upper_threshold, rate, offset)

The first band whose threshold is >= the amount is selected and evaluated as
``rate * amount - offset``. The last band uses ``float('inf')`` as its
threshold so every non-negative amount matches a band.
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

Band = Tuple[float, float, float]


def floor_zero(amount: float) -> float:
    """Clamp a derived amount to a minimum of zero."""
    return 0 if amount < 0 else amount


def find_band(amount: float, bands: List[Band]) -> int:
    """Return the index of the band that applies to amount.

    Band upper bounds are inclusive: an amount equal to a threshold falls in
    the lower band.
    """
    for index, (threshold, _rate, _offset) in enumerate(bands):
        if amount <= threshold:
            return index
    # Unreachable for well-formed tables (last threshold is inf)
    return len(bands) - 1


def evaluate_band(amount: float, band: Band) -> float:
    """Evaluate a single band's linear formula at amount."""
    _threshold, rate, offset = band
    return amount * rate - offset


def evaluate_bands(amount: float, bands: List[Band]) -> float:
    """Evaluate the band formula selected by amount.

    Args:
        amount: Amount to look up (taxable base, salary, etc.)
        bands: Ordered (threshold, rate, offset) table

    Returns:
        ``rate * amount - offset`` for the first band with amount <= threshold
    """
    index = find_band(amount, bands)
    logger.debug(f"band {index} selected for {amount:,.2f}")
    return evaluate_band(amount, bands[index])
