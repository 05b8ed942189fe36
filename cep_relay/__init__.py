"""Postal code (CEP) to temperature relay: a front service and a relay service."""

__version__ = "1.0.0"
