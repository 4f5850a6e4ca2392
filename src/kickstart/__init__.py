"""kickstart - Scaffold JavaScript application projects."""

__version__ = "0.3.0"
