"""Command implementations for the notempty CLI."""
