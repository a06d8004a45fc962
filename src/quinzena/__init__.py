# src/quinzena/__init__.py
"""
Quinzena - Delivery Earnings Engine

Turns per-day delivery counts (by carrier and service tier) into earnings
and delivery totals over days, half-months ("quinzenas"), months and
rolling windows, including migration of the legacy daily record format.
"""

__version__ = "1.0.0"
