"""Parameter registry, property resolution and usage text."""

from .errors import ConfigError, InvalidFormat, IOFailure, MissingRequiredParameter
from .registry import (
    ParameterDeclaration,
    ParameterKind,
    PropertySet,
    Registry,
    RegistryBuilder,
    build_registry,
    get_default_registry,
)
from .help import format_parameter_help, render_help, render_usage_line
from .path_lists import parse_path_list, read_path_list, resolve_path_list
from .resolver import ALL_FILES, Config, PropertiesConfig, ResolvedConfig
from .validation import ValidationError, missing_required, validate_properties

__all__ = [
    "ALL_FILES",
    "Config",
    "ConfigError",
    "IOFailure",
    "InvalidFormat",
    "MissingRequiredParameter",
    "ParameterDeclaration",
    "ParameterKind",
    "PropertiesConfig",
    "PropertySet",
    "Registry",
    "RegistryBuilder",
    "ResolvedConfig",
    "ValidationError",
    "build_registry",
    "format_parameter_help",
    "get_default_registry",
    "missing_required",
    "parse_path_list",
    "read_path_list",
    "render_help",
    "render_usage_line",
    "resolve_path_list",
    "validate_properties",
]
