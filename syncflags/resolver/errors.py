"""Resolver errors."""


class InvalidSettingNameError(ValueError):
    """Raised when a setting name is empty."""

    pass
