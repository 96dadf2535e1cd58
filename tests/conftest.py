"""Pytest configuration for the datevalue test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from datevalue import DateConfig, FixedClock, PathLocaleLoader
from datevalue.constants import BUNDLED_LOCALE_DIR

from tests.helpers.locales import MemoryLocaleLoader

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def memory_config() -> DateConfig:
    """Config backed by in-memory en_US/fr_FR documents and a fixed clock at epoch 0."""
    return DateConfig(locale="en_US", loader=MemoryLocaleLoader(), clock=FixedClock(0))


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled locale resources."""
    target = tmp_path / "locales"
    shutil.copytree(BUNDLED_LOCALE_DIR, target)
    return target


@pytest.fixture
def path_config(locale_dir: Path) -> DateConfig:
    """Config reading locale resources from the writable ``locale_dir`` copy."""
    return DateConfig(locale="en_US", loader=PathLocaleLoader(locale_dir))
