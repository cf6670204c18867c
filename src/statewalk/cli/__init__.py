"""statewalk CLI - Command line interface for statewalk."""

from statewalk.cli.commands import cli


def main() -> None:
    """Main entry point for the statewalk CLI."""
    cli()


__all__ = ["main", "cli"]
