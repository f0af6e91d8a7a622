from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext

from invoice_payments.domain.exceptions import InvalidTaxPolicyError
from invoice_payments.domain.value_objects.invoice_type import InvoiceType
from invoice_payments.domain.value_objects.money import ZERO

DEFAULT_COMMERCIAL_RATE = Decimal("0.14")
DEFAULT_DECIMAL_PLACES = 2


@dataclass(frozen=True, slots=True)
class TaxPolicy:
    """Value object for the surcharge added to commercial invoice payments.

    Every payment on a COMMERCIAL invoice accrues ``amount * rate`` of tax,
    rounded half-even to ``decimal_places`` (the currency's minor unit).
    STANDARD invoices accrue no tax.
    """

    rate: Decimal = DEFAULT_COMMERCIAL_RATE
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Decimal):
            try:
                object.__setattr__(self, "rate", Decimal(str(self.rate)))
            except InvalidOperation as e:
                raise InvalidTaxPolicyError(f"Tax rate is not a number: {self.rate!r}") from e

        if not self.rate.is_finite() or self.rate < ZERO:
            raise InvalidTaxPolicyError(f"Tax rate must be a non-negative number, got {self.rate}")

        if self.decimal_places < 0:
            raise InvalidTaxPolicyError(
                f"Tax decimal places cannot be negative, got {self.decimal_places}"
            )

    @property
    def quantum(self) -> Decimal:
        return Decimal(1).scaleb(-self.decimal_places)

    def tax_for(self, invoice_type: InvoiceType, amount: Decimal) -> Decimal:
        """Return the tax accrued by a payment of ``amount`` on an invoice of this type.

        Precision is widened to the operands so the product and the rounded
        result are exact for any finite amount.
        """
        if invoice_type != InvoiceType.COMMERCIAL:
            return ZERO

        with localcontext() as ctx:
            ctx.prec = max(
                ctx.prec, len(amount.as_tuple().digits) + len(self.rate.as_tuple().digits)
            )
            tax = amount * self.rate
            ctx.prec = max(ctx.prec, tax.adjusted() + 1 + self.decimal_places)
            return tax.quantize(self.quantum, rounding=ROUND_HALF_EVEN)
