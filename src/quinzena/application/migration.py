# src/quinzena/application/migration.py
"""
Entry Migration - Legacy and Partial Records to Canonical Form

Normalizes whatever the persistence side holds for a day into a complete
canonical DailyRecord:
- no record -> all-zero record
- legacy record -> every count moved into the express slot when the day was
  flagged express, otherwise into the normal slot (the legacy format never
  recorded a mixed day, so the split cannot be recovered)
- partial canonical record -> missing categories filled with zeros

Files that USE this module:
- quinzena.application.earnings (every computation migrates first)
- tests.test_migration (unit tests)

Files that this module USES:
- quinzena.domain.models (DailyRecord, LegacyDailyRecord, TierCounts)
"""
from __future__ import annotations

from quinzena.domain.models import (
    CATEGORIES,
    DailyRecord,
    LegacyDailyRecord,
    RawRecord,
    TierCounts,
)


def empty_record() -> DailyRecord:
    """All-zero canonical record."""
    return DailyRecord({category: TierCounts() for category in CATEGORIES})


def _migrate_legacy(entry: LegacyDailyRecord) -> DailyRecord:
    counts = {}
    for category in CATEGORIES:
        count = entry.get(category)
        if entry.is_express:
            counts[category] = TierCounts(normal=0, express=count)
        else:
            counts[category] = TierCounts(normal=count, express=0)
    return DailyRecord(counts)


def migrate_entry(raw: RawRecord) -> DailyRecord:
    """
    Convert a raw daily record into a complete canonical record.

    Never mutates the input; migrating an already migrated record returns
    an equal record.

    Args:
        raw: DailyRecord, LegacyDailyRecord or None for a day without record

    Returns:
        DailyRecord with all four categories present

    Raises:
        TypeError: If raw is not one of the record types
    """
    if raw is None:
        return empty_record()
    if isinstance(raw, LegacyDailyRecord):
        return _migrate_legacy(raw)
    if isinstance(raw, DailyRecord):
        return DailyRecord({category: raw.get(category) for category in CATEGORIES})
    raise TypeError(f"Unsupported daily record type: {type(raw).__name__}")
