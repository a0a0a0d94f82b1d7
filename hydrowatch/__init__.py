"""HydroWatch - seasonal water level insights."""

__version__ = "0.1.0"
