"""Errors, ports and application state shared by every layer."""
