"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A required setting is missing or still holds its placeholder."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} must be configured in production")
