"""Sales Ledger Package — read-only analytics tools over customers and their sales.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
