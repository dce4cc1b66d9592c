from donare.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
