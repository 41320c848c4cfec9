"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., LOG_LEVEL → log_level).

UserConfig is intentionally minimal - users only specify what they want
to override from the defaults. Validation is lenient: upper- or lower-case
keys and values are both accepted and unknown keys are ignored.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from seqguard.schemas.base import GuardBaseModel


class UserReportingConfig(GuardBaseModel):
    """User-facing reporting config."""
    type_names: Optional[str] = None
    show_dtype: Optional[bool] = None

    @field_validator("type_names", mode="before")
    @classmethod
    def normalize_type_names(cls, v):
        """Normalize style names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserLoggingConfig(GuardBaseModel):
    """User-facing logging config."""
    log_violations: Optional[bool] = None
    level: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Normalize level names to uppercase."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class UserConfig(GuardBaseModel):
    """User-facing configuration schema.
    
    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.
    
    Usage
    -----
        user_cfg = UserConfig(
            type_names="qualified",
            log_level="warning",
        )
        
        internal = resolve_config(param_cfg, user_cfg)
    """
    
    # Flat aliases
    type_names: Optional[Literal["short", "qualified"]] = Field(None, alias="TYPE_NAMES")
    show_dtype: Optional[bool] = Field(None, alias="SHOW_DTYPE")
    log_violations: Optional[bool] = Field(None, alias="LOG_VIOLATIONS")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )
    
    # Nested overrides (advanced users)
    reporting: Optional[UserReportingConfig] = None
    logging: Optional[UserLoggingConfig] = None
    
    model_config = GuardBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("type_names", mode="before")
    @classmethod
    def normalize_type_names(cls, v):
        """Normalize style names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Normalize level names to uppercase."""
        if isinstance(v, str):
            return v.upper().strip()
        return v
    
    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.
        
        Nested sections win over the flat aliases when both are given.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}
        
        # Reporting section
        reporting = {}
        if self.type_names is not None:
            reporting["type_names"] = self.type_names
        if self.show_dtype is not None:
            reporting["show_dtype"] = self.show_dtype
        
        if self.reporting is not None:
            reporting.update(self.reporting.model_dump(exclude_none=True))
        
        if reporting:
            overrides["reporting"] = reporting
        
        # Logging section
        logging_cfg = {}
        if self.log_violations is not None:
            logging_cfg["log_violations"] = self.log_violations
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        
        if self.logging is not None:
            logging_cfg.update(self.logging.model_dump(exclude_none=True))
        
        if logging_cfg:
            overrides["logging"] = logging_cfg
        
        return overrides
