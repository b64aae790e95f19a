"""classlint model layer -- public type re-exports."""

from classlint.model.diagnostic import Diagnostic, Replacement, Severity
from classlint.model.settings import Settings, SettingsError, parse_settings

__all__ = [
    # diagnostic
    "Severity",
    "Replacement",
    "Diagnostic",
    # settings
    "Settings",
    "SettingsError",
    "parse_settings",
]
