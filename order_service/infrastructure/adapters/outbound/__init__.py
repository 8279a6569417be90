"""Outbound (driven) adapters."""
