"""Game of Fifteen generalized to d x d boards."""

__version__ = "1.0.0"
