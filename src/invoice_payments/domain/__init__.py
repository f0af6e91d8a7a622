"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., Invoice, Payment)
- Value Objects: Immutable objects defined by their attributes (e.g., InvoiceReference, TaxPolicy)
- Outcomes: The tagged classification returned for every processed payment
- Domain Exceptions: Fatal conditions and validation failures

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
