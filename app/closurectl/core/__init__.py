"""Core infrastructure: paths and configuration."""
