"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Randomness and time are injected, never read from globals
"""
