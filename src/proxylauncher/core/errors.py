"""Errors raised while loading a config and launching the target.

Every error is terminal for the current launch attempt. The message of each
exception is what the user sees in the error dialog.
"""

from __future__ import annotations


class ProxyLauncherError(Exception):
    """Base class for all launcher failures."""


class ConfigError(ProxyLauncherError):
    """The configuration file is missing, unreadable or invalid."""


class MissingTargetError(ConfigError):
    def __init__(self):
        super().__init__("target executable not specified in config")


class DuplicateKeyError(ConfigError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"duplicate key in config: {key}")


class InvalidValueError(ConfigError):
    def __init__(self, key: str, value: str, allowed: str):
        self.key = key
        self.value = value
        super().__init__(f"invalid {key} value {value!r}, must be {allowed}")


class MissingOrderError(ConfigError):
    def __init__(self):
        super().__init__("extraArgsOrder must be specified when extraArgs is set")


class SourceUnreadableError(ConfigError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"error opening config file: {reason}")


class TargetNotFoundError(ProxyLauncherError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"target executable not found: {path}")


class LaunchError(ProxyLauncherError):
    def __init__(self, reason: str):
        super().__init__(f"failed to execute target: {reason}")
