"""Version information for neo-model-cache."""

__version__ = "0.1.0"
