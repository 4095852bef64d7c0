"""
Tax Copilot - Source Package

A GST bookkeeping assistant for Indian micro-businesses.
Log sales and expenses, see the estimated GST liability,
and stay on top of filing due dates.

DESIGN PRINCIPLES:
1. The ledger is the single source of truth
2. Tax is computed once, when a transaction is recorded
3. Storage failures never lose the in-memory ledger
4. Everything shown on screen is derived, never cached
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Tax Copilot Team"
