"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Orchestration of the customer and sales order aggregates
- Ports: Abstract interfaces for the clock and identifier generation
- DTOs: Data transfer objects for use case input/output

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
