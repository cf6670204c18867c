"""Reporters for models and walks."""

from statewalk.reporters.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
