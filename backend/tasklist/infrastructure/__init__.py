"""Infrastructure Layer: database access, repositories and logging setup.

Invariants:
    - Repositories implement the protocols in core/repository_protocols.py
    - Database failures leave this layer only as StorageError
"""
