"""Speech API client, katakana readings, settings and chat views for a read-aloud bot."""

__version__ = "0.1.0"