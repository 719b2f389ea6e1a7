"""Frontend interfaces for the Game of Life."""

from .cli import CLIGameOfLife, render_board

__all__ = ["CLIGameOfLife", "render_board"]
