"""Snapshot layer.

Pure functions that reduce one status, prefs and lock-status fetch into a
deterministic :class:`~tsview.state.snapshot.StateSnapshot`.  Nothing in
this package performs I/O.
"""
