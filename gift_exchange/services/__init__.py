"""Services Layer — use-case handlers between the API and the Room aggregate.

Invariants:
    - Handlers split by resource (rooms, users)
    - Handlers own no state beyond their injected repositories
"""
