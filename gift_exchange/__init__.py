"""Gift Exchange Application Package — rooms, participants, and the draw.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
