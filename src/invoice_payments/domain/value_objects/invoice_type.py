from enum import Enum


class InvoiceType(Enum):
    """Invoice categories. Commercial invoices accrue tax on every payment."""

    STANDARD = "standard"
    COMMERCIAL = "commercial"
