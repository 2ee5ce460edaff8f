"""
Ranking & Classification Service

Orders operational leaks and stamps each with its rank, severity tier and
constraint label.

Rules:
- Only leaks with monthlyLoss > 0 are ranked
- Sort by monthlyLoss descending; ties keep catalog order (stable sort)
- Rank is dense: 1..N with no gaps or duplicates
- Severity is the leak's share of total ranked monthly loss:
    >= 40% critical, >= 20% high, >= 10% medium, otherwise low
- constraintLabel: rank 1 Primary, rank 2 Secondary, otherwise Contributing
"""

from typing import List

from revenue_leak.models.enums import Severity
from revenue_leak.models.schemas import Leak
from revenue_leak.services.constants import (
    CONTRIBUTING_LEAK_LABEL,
    PRIMARY_CONSTRAINT_LABEL,
    SECONDARY_CONSTRAINT_LABEL,
    SEVERITY_CRITICAL_SHARE,
    SEVERITY_HIGH_SHARE,
    SEVERITY_MEDIUM_SHARE,
)


def determine_severity(monthly_loss: int, total_monthly_loss: int) -> Severity:
    """
    Severity tier from a leak's share of the total.

    Args:
        monthly_loss: The leak's monthly loss
        total_monthly_loss: Sum of monthly losses across ranked leaks

    Returns:
        Severity enum value
    """
    if total_monthly_loss <= 0 or monthly_loss <= 0:
        return Severity.LOW

    share = monthly_loss / total_monthly_loss
    if share >= SEVERITY_CRITICAL_SHARE:
        return Severity.CRITICAL
    if share >= SEVERITY_HIGH_SHARE:
        return Severity.HIGH
    if share >= SEVERITY_MEDIUM_SHARE:
        return Severity.MEDIUM
    return Severity.LOW


def constraint_label_for_rank(rank: int) -> str:
    """Primary / secondary constraint label for ranks 1 and 2, contributing leak otherwise."""
    if rank == 1:
        return PRIMARY_CONSTRAINT_LABEL
    if rank == 2:
        return SECONDARY_CONSTRAINT_LABEL
    return CONTRIBUTING_LEAK_LABEL


def rank_leaks(leaks: List[Leak]) -> List[Leak]:
    """
    Rank the positive-loss leaks.

    Input leaks are not modified; ranked copies are returned.

    Args:
        leaks: Unranked leaks in catalog order (zero-loss leaks allowed)

    Returns:
        Ranked leaks with monthlyLoss > 0, highest loss first
    """
    positive = [leak for leak in leaks if leak.monthlyLoss > 0]
    ordered = sorted(positive, key=lambda leak: leak.monthlyLoss, reverse=True)
    total = sum(leak.monthlyLoss for leak in ordered)

    return [
        leak.model_copy(
            update={
                "rank": rank,
                "severity": determine_severity(leak.monthlyLoss, total),
                "constraintLabel": constraint_label_for_rank(rank),
            }
        )
        for rank, leak in enumerate(ordered, start=1)
    ]
