"""Event and booking records over a shared async database handle."""

__version__ = "1.0.0"
