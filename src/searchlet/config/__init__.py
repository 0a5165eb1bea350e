"""Config module exports."""

from searchlet.config.loader import SearchletSettings, load_settings
from searchlet.config.models import LoggingConfig, LogOutputConfig, SearchletConfig
from searchlet.config.options import OPTIONS, OptionSpec, option_help, resolve_options

__all__ = [
    "load_settings",
    "resolve_options",
    "option_help",
    "OPTIONS",
    "OptionSpec",
    "SearchletConfig",
    "SearchletSettings",
    "LoggingConfig",
    "LogOutputConfig",
]
