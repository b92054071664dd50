"""
Utility functions module.

Common utility functions shared across the engine.

Date Semantics:
- Every series is keyed by a UTC calendar day (datetime.date)
- Wall-clock time never enters a join key
- Display strings are produced only at the presentation boundary
"""
