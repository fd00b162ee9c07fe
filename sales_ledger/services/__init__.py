"""Services Layer — query engine, tool handlers, tool dispatch.

Invariants:
    - Services depend on core protocols, never on a concrete store
    - Tool handlers delegate every rule to the engine and the formatter

Design Decisions:
    - Imperative shell around pure core: async IO here, logic in core/
"""
