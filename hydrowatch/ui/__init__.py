"""Dashboard UI module."""
