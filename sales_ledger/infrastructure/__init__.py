"""Infrastructure Layer — database access, data store adapters, logging.

Invariants:
    - Infrastructure never imports from services/
    - All SQLAlchemy failures surface as DatabaseError

Design Decisions:
    - Stores implement core.repository_protocols.SalesDataStore structurally
"""
