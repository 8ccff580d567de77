"""Database Base: SQLAlchemy declarative Base shared by all models."""
