"""Bundled terminal commands."""
