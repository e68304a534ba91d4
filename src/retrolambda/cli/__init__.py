"""Command-line interface for Retrolambda."""
