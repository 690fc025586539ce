"""Core — pure domain logic (filters, pagination, stat blocks, errors).

Invariants:
    - Nothing in core/ performs IO or imports SQLAlchemy/FastAPI
"""
