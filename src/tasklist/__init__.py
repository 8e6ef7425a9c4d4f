"""
tasklist: per-owner task lists on a durable ordered key-value store.
"""

__version__ = "0.1.0"
