"""CLI command implementations for rtbench."""
