"""
Analysis result models.

Immutable bundle of every indicator computed for one request.
"""
