"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Period, PeriodKind)
- task_store.py: in-memory ordered store + snapshot encoding
- recurrence.py: per-tick rollover of daily/weekly tasks
- snapshot.py: JSON snapshot file I/O
"""
