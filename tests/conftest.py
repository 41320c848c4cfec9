"""Root-level pytest fixtures for the seqguard test suite.

Provides shared configuration fixtures following the Pydantic-based
configuration layers. Tests build guards through these fixtures instead
of constructing raw config dicts.
"""

import pytest

from seqguard import ParamConfig, SizeGuard, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def guard(internal_config):
    """SizeGuard built from the default configuration."""
    return SizeGuard(internal_config)


@pytest.fixture
def make_guard(param_config):
    """Factory fixture for guards with custom configuration.

    Examples
    --------
    >>> def test_qualified_names(make_guard):
    ...     guard = make_guard(type_names="qualified")
    """
    def _make(**user_overrides):
        """Create SizeGuard with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return SizeGuard(resolve_config(param_config, user))
        return SizeGuard(resolve_config(param_config, None))

    return _make
