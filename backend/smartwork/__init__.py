"""Smart work assistant API: work-log notes with duplicate checks and keyword classification."""

__version__ = "0.1.0"
