# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: always open the console as a fixed owner
# OWNER = "alice"

# Example: throwaway session, nothing written to disk
# STORAGE = "memory"
