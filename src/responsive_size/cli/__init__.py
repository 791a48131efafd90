"""Command line interface."""

from responsive_size.cli.app import create_app

__all__ = ["create_app"]
