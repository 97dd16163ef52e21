"""Input helpers: CSV issue files and masked console input."""
