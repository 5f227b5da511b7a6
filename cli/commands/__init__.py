"""CLI commands package."""

from cli.commands.agenda import agenda
from cli.commands.delete import delete
from cli.commands.export import export
from cli.commands.holidays import holidays
from cli.commands.info import info
from cli.commands.ls import ls
from cli.commands.moon import moon
from cli.commands.preview import preview
from cli.commands.save import save
from cli.commands.today import today

__all__ = [
    "agenda",
    "delete",
    "export",
    "holidays",
    "info",
    "ls",
    "moon",
    "preview",
    "save",
    "today",
]
