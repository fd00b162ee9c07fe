"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic
    - The only async definitions are the SalesDataStore protocol signatures

Design Decisions:
    - Functional core separated from imperative shell
"""
