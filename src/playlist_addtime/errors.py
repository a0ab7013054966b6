from __future__ import annotations


class PlaylistAddTimeError(Exception):
    """Base class for errors reported to the user by the CLI."""


class UsageError(PlaylistAddTimeError):
    pass


class ApiError(PlaylistAddTimeError):
    """The upstream API call failed or returned a non-success code."""


class ConfigError(PlaylistAddTimeError):
    """The config file exists but cannot be parsed."""
