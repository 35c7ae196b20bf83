"""medibook — a local data manager for clinic patients, appointments and bills."""

__version__ = "0.1.0"
