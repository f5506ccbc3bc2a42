"""Release orchestration for Flutter mobile apps."""

__version__ = "0.4.0"
