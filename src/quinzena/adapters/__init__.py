# src/quinzena/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters between stored data and the domain:
- Serialization (stored JSON shapes <-> domain records)
"""

__all__ = []
