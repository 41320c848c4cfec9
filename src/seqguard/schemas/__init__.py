"""Pydantic configuration schemas for seqguard.

All configuration validation, coercion, and normalization happens at
schema validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Library defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from seqguard.schemas.resolve import resolve_config
from seqguard.schemas.internal import InternalConfig
from seqguard.schemas.param import ParamConfig
from seqguard.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
