"""
Price history models, normalization and date-keyed series.
"""
