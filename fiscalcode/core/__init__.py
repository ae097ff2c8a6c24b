"""Core Layer — pure fiscal code logic, no IO, no async, no clock.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic; lookup tables are module constants

Design Decisions:
    - Functional core separated from the HTTP shell: every rule is testable without a client
"""
