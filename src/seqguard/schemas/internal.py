"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains no optional fields.
"""

from typing import Literal
from pydantic import ConfigDict
from seqguard.schemas.base import GuardBaseModel


class InternalReportingConfig(GuardBaseModel):
    """Runtime message rendering configuration."""
    type_names: Literal["short", "qualified"]
    show_dtype: bool


class InternalLoggingConfig(GuardBaseModel):
    """Runtime logging configuration."""
    log_violations: bool
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(GuardBaseModel):
    """Authoritative runtime configuration.
    
    Guards receive InternalConfig and access fields directly:
    
        def __init__(self, config: InternalConfig):
            self.log_violations = config.logging.log_violations  # NOT .get()
    
    Immutable after construction, so one instance can be shared by any
    number of guards and threads.
    """
    
    reporting: InternalReportingConfig
    logging: InternalLoggingConfig
    
    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
