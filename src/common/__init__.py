"""Helpers shared by the resolution and projection packages."""
