"""Table selection and validation for schema-driven model generation."""

__version__ = "0.1.0"
