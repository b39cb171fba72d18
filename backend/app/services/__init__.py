"""Services Layer — use cases orchestrating repository calls.

Invariants:
    - One use case per file, one public execute() method each
    - Use cases depend on core protocols only, never on infrastructure adapters
    - No error translation or suppression: storage errors pass through verbatim

Design Decisions:
    - Constructor injection of the repository: FastAPI providers wire it per request
"""
