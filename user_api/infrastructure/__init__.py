"""Infrastructure Layer — database sessions, repositories, logging.

Invariants:
    - Only this layer imports SQLAlchemy session/engine APIs
    - Storage failures leave this layer as core/errors.py types
"""
