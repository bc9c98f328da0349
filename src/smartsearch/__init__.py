"""SmartSearch - in-memory keyword search over uploaded documents."""

__version__ = "0.1.0"
