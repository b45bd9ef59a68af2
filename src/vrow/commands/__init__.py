"""Subcommands of the vrow CLI."""
