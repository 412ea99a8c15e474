"""sales-core - sales order aggregate built from DDD building blocks."""

__version__ = "0.1.0"
