"""Adapters – infrastructure implementations (SQLAlchemy)."""
