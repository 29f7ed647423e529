"""Find duplicate media files and move extra copies into quarantine folders."""

__version__ = "0.1.0"
