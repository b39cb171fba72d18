"""Core Layer — pure domain types, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Repository contracts are declared here and implemented by infrastructure/

Design Decisions:
    - Functional core separated from imperative shell
"""
