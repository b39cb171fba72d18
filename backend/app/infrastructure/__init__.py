"""Infrastructure Layer — repository adapters, database sessions, and logging.

Invariants:
    - Adapters implement protocols from core/repository_protocols.py
    - All storage failures mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Adapters conform structurally (Protocol), no shared base class
"""
