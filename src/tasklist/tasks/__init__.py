"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_codec.py: binary record and composite-key encoding
- paginator.py: page/limit -> skip/take window
- id_allocator.py: durable, strictly increasing task ids
- task_store.py: (owner, id) -> Task ordered map over a storage medium
- task_service.py: per-owner operations with typed errors
"""
