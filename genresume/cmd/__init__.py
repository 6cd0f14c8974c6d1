"""Command implementations for the genresume CLI."""

from genresume.cmd.resume import cmd_generate

__all__ = ["cmd_generate"]
