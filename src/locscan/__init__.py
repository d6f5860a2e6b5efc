"""locscan - string literal and resource reference scanner for localization."""

__version__ = "0.1.0"
