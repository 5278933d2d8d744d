"""Command-line interface for Skilldex."""
