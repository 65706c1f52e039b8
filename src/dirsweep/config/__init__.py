"""Configuration loading for dirsweep."""
