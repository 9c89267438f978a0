"""Anchor-style program workflow (dry-run)."""
