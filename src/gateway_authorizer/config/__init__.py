"""Config – 12-factor settings and their validation errors."""

from gateway_authorizer.config.settings import AuthorizerSettings, EnvSettingsLoader, Settings, SettingsLoader
from gateway_authorizer.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AuthorizerSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
