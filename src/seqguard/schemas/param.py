"""ParamConfig: Library defaults for seqguard.

This module defines the complete default configuration. Every tunable
parameter must have a default here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field
from seqguard.schemas.base import GuardBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ReportingConfig(GuardBaseModel):
    """Violation message rendering."""
    type_names: Literal["short", "qualified"] = Field(
        "short", description="Render 'ndarray' or 'numpy.ndarray'"
    )
    show_dtype: bool = Field(True, description="Append element dtype, e.g. ndarray[int64]")


class LoggingConfig(GuardBaseModel):
    """Violation logging."""
    log_violations: bool = True
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(GuardBaseModel):
    """Complete configuration with all defaults.
    
    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:
    
        internal_cfg = resolve_config(param_cfg, user_cfg)
    
    Runtime code only sees InternalConfig.
    """
    
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
