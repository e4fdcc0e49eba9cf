"""Terminal styling for report and update output.

Styling is a strategy held by the context so that tests can use PlainFormatter
and assert on undecorated text.
"""

from abc import ABC, abstractmethod

import click


class ReportFormatter(ABC):
    """Decorates the pieces of a report line for display."""

    @abstractmethod
    def package(self, name: str) -> str:
        """Style a package name."""

    @abstractmethod
    def current_version(self, version: str) -> str:
        """Style the installed version."""

    @abstractmethod
    def latest_version(self, version: str) -> str:
        """Style the latest available version."""

    @abstractmethod
    def heading(self, message: str) -> str:
        """Style a section heading."""

    @abstractmethod
    def success(self, message: str) -> str:
        """Style a success message."""

    @abstractmethod
    def warning(self, message: str) -> str:
        """Style a warning or nothing-to-do message."""

    @abstractmethod
    def error(self, message: str) -> str:
        """Style an error message."""


class PlainFormatter(ReportFormatter):
    """Returns every piece unchanged."""

    def package(self, name: str) -> str:
        return name

    def current_version(self, version: str) -> str:
        return version

    def latest_version(self, version: str) -> str:
        return version

    def heading(self, message: str) -> str:
        return message

    def success(self, message: str) -> str:
        return message

    def warning(self, message: str) -> str:
        return message

    def error(self, message: str) -> str:
        return message


class ColorFormatter(ReportFormatter):
    """ANSI colors via click.style.

    Package names are blue, installed versions yellow and latest versions
    green. click.echo strips the codes when output is not a terminal.
    """

    def package(self, name: str) -> str:
        return click.style(name, fg="blue")

    def current_version(self, version: str) -> str:
        return click.style(version, fg="yellow")

    def latest_version(self, version: str) -> str:
        return click.style(version, fg="green")

    def heading(self, message: str) -> str:
        return click.style(message, fg="blue", bold=True)

    def success(self, message: str) -> str:
        return click.style(message, fg="green")

    def warning(self, message: str) -> str:
        return click.style(message, fg="yellow")

    def error(self, message: str) -> str:
        return click.style(message, fg="red")
