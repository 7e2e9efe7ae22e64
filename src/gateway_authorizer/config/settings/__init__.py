"""Config settings – 12-factor env-based configuration."""
from gateway_authorizer.config.settings.base import AuthorizerSettings, Settings
from gateway_authorizer.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["AuthorizerSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
