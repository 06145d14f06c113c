"""rustman - list and inspect the Cargo projects in a directory."""

__version__ = "0.1.0"
