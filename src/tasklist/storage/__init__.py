"""
Storage media: named scalar cells plus one ordered byte-keyed map.

- sqlite_medium.py: durable, survives restart
- memory_medium.py: in-memory, for tests and throwaway sessions
"""
