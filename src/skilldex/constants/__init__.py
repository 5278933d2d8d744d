"""Constant tables shared across Skilldex modules."""
