"""Core — pure domain types, errors and pagination rules (no IO).

Invariants:
    - Nothing in core/ imports SQLAlchemy or opens a session
"""
