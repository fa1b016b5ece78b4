"""ad: multi-module git dispatcher for the AD project workspace."""

__version__ = "0.3.0"
