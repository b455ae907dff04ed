"""StyleScan — house-style checks for student C++ submissions."""

__version__ = "0.1.0"
