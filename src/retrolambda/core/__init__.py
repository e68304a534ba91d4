"""Core configuration handling for Retrolambda."""
