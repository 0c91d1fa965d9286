"""Marketplace ledger reconciliation and ROI analysis."""

__version__ = "0.1.0"
