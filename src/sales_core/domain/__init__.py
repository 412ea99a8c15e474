"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., SalesOrder, Customer)
- Value Objects: Immutable objects defined by their attributes (e.g., Money, Currency)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on the application or infrastructure
layers. The current instant and identifiers are passed in, never read from
global state.
"""
