"""Command-line interface for mobrel."""
