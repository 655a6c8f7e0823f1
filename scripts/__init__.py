"""Command line entry points for Misère Nim."""
