"""Configuration for DateValue construction.

Provides a single frozen dataclass that bundles the collaborators a
DateValue needs: where locale resources come from, which locale to fall
back to, which locale to use when none is given, and which clock answers
"now".

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from datevalue.constants import FALLBACK_LOCALE
from datevalue.host import SystemClock
from datevalue.localization.loading import PathLocaleLoader

if TYPE_CHECKING:
    from datevalue.host import Clock
    from datevalue.localization.loading import LocaleResourceLoader

__all__ = ["DEFAULT_CONFIG", "DateConfig"]


@dataclass(frozen=True, slots=True)
class DateConfig:
    """Immutable configuration for DateValue.

    All fields have defaults; ``DateConfig()`` reads the bundled locale
    resources, falls back to en_US, detects the system locale and uses
    the system clock.

    Attributes:
        locale: Locale used when a constructor gets none (None: system locale)
        fallback_locale: Locale loaded when the requested one has no resource
        loader: Locale resource loader
        clock: Clock used by DateValue.now() and DateValue.create(None)

    Example:
        >>> config = DateConfig(locale="de_DE", clock=FixedClock(0))
        >>> DateValue.now(config=config).format("long")
        '1. Januar 1970'
    """

    locale: str | None = None
    fallback_locale: str = FALLBACK_LOCALE
    loader: LocaleResourceLoader = field(default_factory=PathLocaleLoader)
    clock: Clock = field(default_factory=SystemClock)

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If fallback_locale is empty, or locale is an empty string
        """
        if not self.fallback_locale:
            msg = "fallback_locale must not be empty"
            raise ValueError(msg)
        if self.locale is not None and not self.locale:
            msg = "locale must be None or a non-empty locale code"
            raise ValueError(msg)


DEFAULT_CONFIG = DateConfig()
