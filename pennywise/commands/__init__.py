"""CLI command groups for pennywise."""
