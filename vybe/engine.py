"""
Vybe Reading - Engine

Feature-gated entry point. The gate is an explicit FeatureConfig; the
environment is consulted only when no config or override is given.
"""
from __future__ import annotations
import logging
from typing import Mapping, Optional

from .assembler import assemble_reading
from .config import (
    DEFAULT_CONFIG,
    FeatureConfig,
    ReadingConfig,
    is_feature_enabled,
)
from .constants import FEATURE_FLAG
from .types import CaptureInput, GeneratedReading

logger = logging.getLogger(__name__)


class FeatureDisabledError(RuntimeError):
    """Raised when the reading engine is called while its feature flag is off."""

    def __init__(self, flag: str = FEATURE_FLAG):
        self.flag = flag
        super().__init__(
            f"{flag} is disabled. Enable the flag to access the Volume IV engine."
        )


class ReadingEngine:
    """
    Gated reading generator bound to one config and one feature decision.

    Usage:
        engine = ReadingEngine(features=FeatureConfig.from_env())
        result = engine.generate(CaptureInput(raw="15:51 74%"))
    """

    def __init__(
        self,
        config: Optional[ReadingConfig] = None,
        features: Optional[FeatureConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.features = features if features is not None else FeatureConfig.from_env()

    @property
    def enabled(self) -> bool:
        return self.features.enabled

    def generate(self, capture: CaptureInput, explain: bool = False) -> GeneratedReading:
        """
        Raises:
            FeatureDisabledError: If the feature flag is off
        """
        if not self.enabled:
            logger.warning("Refusing reading: %s is disabled", FEATURE_FLAG)
            raise FeatureDisabledError()
        return assemble_reading(capture, self.config, explain=explain)


def generate_reading(
    capture: CaptureInput,
    feature_flag_override: Optional[bool] = None,
    config: Optional[ReadingConfig] = None,
    explain: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> GeneratedReading:
    """
    Gated one-shot entry point.

    Args:
        capture: Capture to read
        feature_flag_override: Explicit boolean wins over the environment
        config: Reading config (defaults to the bundled phrasebook)
        explain: Attach the explain payload
        environ: Environment mapping to consult (defaults to os.environ)

    Raises:
        FeatureDisabledError: If neither the override nor the environment enables the engine
    """
    features = FeatureConfig(enabled=is_feature_enabled(feature_flag_override, environ))
    return ReadingEngine(config, features).generate(capture, explain=explain)
