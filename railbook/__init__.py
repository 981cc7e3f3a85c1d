"""Train and vehicle seat bookings stored in JSON files, with a console command."""

__version__ = "0.1.0"
__all__ = ["entities", "fileio", "booking", "cli"]