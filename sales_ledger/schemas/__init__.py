"""Pydantic Schemas — validation of tool arguments at the agent boundary.

Invariants:
    - Schemas validate at system boundary (agent tool input)
    - Domain records live in core/, not here

Design Decisions:
    - Separate from models: schemas are tool contracts, models are persistence
"""
