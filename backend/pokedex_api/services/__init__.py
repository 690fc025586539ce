"""Services — query construction and persistence operations used by the routes.

Invariants:
    - Services never build HTTP responses; routes shape the envelope
"""
