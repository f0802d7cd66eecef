"""
Vybe Reading - Configuration

Thresholds, reading configuration and the feature gate.

The environment is read in exactly one place, FeatureConfig.from_env(); the
pipeline itself only ever sees explicit config values.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .constants import (
    DEFAULT_NEAR_FULL_PERCENT,
    DEFAULT_SEVENTIES,
    FEATURE_FLAG,
)
from .phrasebook import DEFAULT_PHRASEBOOK, Phrasebook


@dataclass(frozen=True)
class Thresholds:
    """Percent bucket cutoffs."""
    near_full_percent: int = DEFAULT_NEAR_FULL_PERCENT
    seventies: Tuple[int, int] = DEFAULT_SEVENTIES

    def __post_init__(self):
        if not 0 <= self.near_full_percent <= 100:
            raise ValueError(
                f"Invalid near-full cutoff: {self.near_full_percent} (must be 0-100)"
            )
        if len(self.seventies) != 2:
            raise ValueError(f"Invalid seventies range: {self.seventies} (expected (low, high))")
        low, high = self.seventies
        if low > high:
            raise ValueError(f"Invalid seventies range: {self.seventies} (low > high)")
        # Normalize lists coming from JSON
        object.__setattr__(self, "seventies", (int(low), int(high)))


@dataclass(frozen=True)
class ReadingConfig:
    phrasebook: Phrasebook = field(default_factory=lambda: DEFAULT_PHRASEBOOK)
    thresholds: Thresholds = field(default_factory=Thresholds)


DEFAULT_CONFIG = ReadingConfig()


def with_config(
    base: ReadingConfig,
    phrasebook: Optional[Phrasebook] = None,
    thresholds: Optional[Thresholds] = None,
) -> ReadingConfig:
    """
    Shallow override: omitted fields keep the base value.

    Returns `base` itself when nothing is overridden.
    """
    if phrasebook is None and thresholds is None:
        return base
    return ReadingConfig(
        phrasebook=phrasebook if phrasebook is not None else base.phrasebook,
        thresholds=thresholds if thresholds is not None else base.thresholds,
    )


# =============================================================================
# FEATURE GATE
# =============================================================================

@dataclass(frozen=True)
class FeatureConfig:
    enabled: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FeatureConfig":
        """Enabled only when the flag is the literal string 'true'."""
        env = os.environ if environ is None else environ
        return cls(enabled=env.get(FEATURE_FLAG) == "true")


def is_feature_enabled(
    override: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """An explicit boolean override wins over the environment."""
    if isinstance(override, bool):
        return override
    return FeatureConfig.from_env(environ).enabled
