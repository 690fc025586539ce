"""Infrastructure Layer — database session management, logging, rate limiting.

Invariants:
    - Infrastructure never imports from api/
"""
