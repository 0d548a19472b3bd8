"""Infrastructure Layer — storage, randomness, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
"""
