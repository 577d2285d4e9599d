class SettingsError(Exception):
    """Base class for settings persistence failures."""


class SettingsDecodeError(SettingsError):
    """Raised when a settings document cannot be read or is invalid."""


class SettingsEncodeError(SettingsError):
    """Raised when settings cannot be turned into a document."""


class SettingsSaveError(SettingsError):
    """Raised when settings cannot be written to disk."""
