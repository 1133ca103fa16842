"""Payment summary over registrations."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from courseboard.domain.entities import Registration


@dataclass(frozen=True, slots=True)
class PaymentSummaryResult:
    paid_count: int
    outstanding_count: int
    rate: int | None

    @property
    def total(self) -> int:
        return self.paid_count + self.outstanding_count


def payment_rate(paid: int, total: int) -> int | None:
    """Whole-percent share of *paid* in *total*, rounded half up; ``None`` when total is 0."""
    if total <= 0:
        return None
    share = Decimal(paid * 100) / Decimal(total)
    return int(share.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize_payments(registrations: Sequence[Registration]) -> PaymentSummaryResult:
    total = len(registrations)
    paid = sum(1 for registration in registrations if registration.is_paid)
    return PaymentSummaryResult(
        paid_count=paid,
        outstanding_count=total - paid,
        rate=payment_rate(paid, total),
    )
