"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: the ``sales-core`` command-line demonstration

Entrypoints wire infrastructure adapters into use case calls
and format results for the delivery mechanism.
"""
