"""Storage adapters for TaskTrack CLI."""

from tasktrack_cli.adapters.json_file import JsonTaskGateway

__all__ = ["JsonTaskGateway"]
