"""Command-line interface for sortkey."""
