# Vybe Reading Engine
# Numeric capture -> tokens -> motifs -> phrasebook-driven reading

from .types import (
    TimeValue,
    PercentValue,
    TemperatureValue,
    DistanceValue,
    MeasureValue,
    CodeValue,
    TaggedCodeValue,
    ReductionDetail,
    Token,
    CaptureInput,
    ReadingHeader,
    NumerologyBlock,
    LayeredMeaningRow,
    AlignmentSummaryRow,
    ResonanceEntry,
    GuidanceEntry,
    VybeReading,
    ExplainPayload,
    GeneratedReading,
)

from .parser import (
    extract_tokens,
    ensure_tokens,
    percent_bucket,
)

from .reduce import (
    build_reduction,
    sum_to_core_number,
    reduce_to_single_digit,
    derive_core_frequency,
)

from .motifs import (
    MotifResult,
    detect_motifs,
    dominant_motif,
    motif_strength,
)

from .ranking import (
    rank_token,
    order_tokens,
)

from .phrasebook import (
    Phrasebook,
    DEFAULT_PHRASEBOOK,
    load_phrasebook,
)

from .config import (
    Thresholds,
    ReadingConfig,
    FeatureConfig,
    DEFAULT_CONFIG,
    with_config,
    is_feature_enabled,
)

from .assembler import assemble_reading

from .explain import build_explain_payload

from .engine import (
    FeatureDisabledError,
    ReadingEngine,
    generate_reading,
)

from .constants import (
    TOKEN_TYPES,
    TYPE_PRIORITY,
    MOTIF_PRIORITY,
    MASTER_NUMBERS,
    FEATURE_FLAG,
    is_valid_token_type,
    is_valid_motif,
)

__all__ = [
    # Types
    "TimeValue",
    "PercentValue",
    "TemperatureValue",
    "DistanceValue",
    "MeasureValue",
    "CodeValue",
    "TaggedCodeValue",
    "ReductionDetail",
    "Token",
    "CaptureInput",
    "ReadingHeader",
    "NumerologyBlock",
    "LayeredMeaningRow",
    "AlignmentSummaryRow",
    "ResonanceEntry",
    "GuidanceEntry",
    "VybeReading",
    "ExplainPayload",
    "GeneratedReading",
    # Tokenizer
    "extract_tokens",
    "ensure_tokens",
    "percent_bucket",
    # Reducer
    "build_reduction",
    "sum_to_core_number",
    "reduce_to_single_digit",
    "derive_core_frequency",
    # Motifs
    "MotifResult",
    "detect_motifs",
    "dominant_motif",
    "motif_strength",
    # Ranking
    "rank_token",
    "order_tokens",
    # Phrasebook
    "Phrasebook",
    "DEFAULT_PHRASEBOOK",
    "load_phrasebook",
    # Config
    "Thresholds",
    "ReadingConfig",
    "FeatureConfig",
    "DEFAULT_CONFIG",
    "with_config",
    "is_feature_enabled",
    # Assembly
    "assemble_reading",
    "build_explain_payload",
    # Engine
    "FeatureDisabledError",
    "ReadingEngine",
    "generate_reading",
    # Constants
    "TOKEN_TYPES",
    "TYPE_PRIORITY",
    "MOTIF_PRIORITY",
    "MASTER_NUMBERS",
    "FEATURE_FLAG",
    # Validators
    "is_valid_token_type",
    "is_valid_motif",
]
