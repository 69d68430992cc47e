"""Keyhue desktop preview app and command line tools."""
