"""Triage building blocks: filters, review state, title similarity, update tracking and layered caching."""

__version__ = "0.1.0"