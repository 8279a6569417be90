"""Messaging adapters."""
