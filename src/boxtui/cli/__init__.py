"""Command-line interface for boxtui."""
