"""Report which entries of a directory are tracked by the dotfiles repository."""

__version__ = "0.1.0"
