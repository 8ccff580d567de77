"""Infrastructure Layer: database access, repositories, and logging setup.

Invariants:
    - SQLAlchemy errors mapped to DatabaseError before leaving this layer
"""
