"""Task List Application Package: multi-tenant todo lists with owner-scoped access.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
