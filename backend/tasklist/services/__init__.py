"""Services Layer: credential handling and ownership-scoped list/item operations.

Invariants:
    - Services hold no mutable state; all shared state lives in the Storage Backend
    - Collaborators are injected through constructors (no global registration)
"""
