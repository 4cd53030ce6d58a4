from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import ConfigFiles, ConfidenceBuckets, Defaults
from .domain.services.mapping.policy import AssignmentPolicy
from .domain.services.mapping.scorer import ScoringWeights

_UNIT_INTERVAL_FIELDS = (
    "phase_a_threshold",
    "phase_b_threshold",
    "relaxed_display_floor",
    "forced_confidence",
    "candidate_epsilon",
    "substitution_penalty",
    "min_retained_confidence",
    "conflict_penalty",
    "manual_confidence",
    "min_confidence",
    "high_confidence",
    "medium_confidence",
)


@dataclass(frozen=True, slots=True)
class MapperConfig:
    phase_a_threshold: float = Defaults.PHASE_A_THRESHOLD
    phase_b_threshold: float = Defaults.PHASE_B_THRESHOLD
    relaxed_display_floor: float = Defaults.RELAXED_DISPLAY_FLOOR
    forced_confidence: float = Defaults.FORCED_CONFIDENCE
    candidate_epsilon: float = Defaults.CANDIDATE_EPSILON
    max_alternatives: int = Defaults.MAX_ALTERNATIVES
    substitution_penalty: float = Defaults.SUBSTITUTION_PENALTY
    min_retained_confidence: float = Defaults.MIN_RETAINED_CONFIDENCE
    conflict_penalty: float = Defaults.CONFLICT_PENALTY
    manual_confidence: float = Defaults.MANUAL_CONFIDENCE
    min_confidence: float = Defaults.MIN_CONFIDENCE
    high_confidence: float = ConfidenceBuckets.HIGH
    medium_confidence: float = ConfidenceBuckets.MEDIUM
    sample_size: int = Defaults.SAMPLE_SIZE
    scoring: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _UNIT_INTERVAL_FIELDS:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        if self.phase_b_threshold > self.phase_a_threshold:
            raise ValueError(
                "phase_b_threshold must not exceed phase_a_threshold, "
                f"got {self.phase_b_threshold} > {self.phase_a_threshold}"
            )
        if self.medium_confidence > self.high_confidence:
            raise ValueError(
                "medium_confidence must not exceed high_confidence, "
                f"got {self.medium_confidence} > {self.high_confidence}"
            )
        if self.max_alternatives < 0:
            raise ValueError(
                f"max_alternatives must be non-negative, got {self.max_alternatives}"
            )
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be positive, got {self.sample_size}")
        known = _scoring_weight_names()
        unknown = sorted(set(self.scoring) - known)
        if unknown:
            raise ValueError(f"Unknown scoring weights: {', '.join(unknown)}")

    @classmethod
    def from_env(cls) -> MapperConfig:
        return cls(
            phase_a_threshold=float(
                os.getenv(
                    "COLUMN_MAPPER_PHASE_A_THRESHOLD", str(Defaults.PHASE_A_THRESHOLD)
                )
            ),
            phase_b_threshold=float(
                os.getenv(
                    "COLUMN_MAPPER_PHASE_B_THRESHOLD", str(Defaults.PHASE_B_THRESHOLD)
                )
            ),
            forced_confidence=float(
                os.getenv(
                    "COLUMN_MAPPER_FORCED_CONFIDENCE", str(Defaults.FORCED_CONFIDENCE)
                )
            ),
            min_confidence=float(
                os.getenv("COLUMN_MAPPER_MIN_CONFIDENCE", str(Defaults.MIN_CONFIDENCE))
            ),
        )

    def to_assignment_policy(self) -> AssignmentPolicy:
        return AssignmentPolicy(
            phase_a_threshold=self.phase_a_threshold,
            phase_b_threshold=self.phase_b_threshold,
            relaxed_display_floor=self.relaxed_display_floor,
            forced_confidence=self.forced_confidence,
            candidate_epsilon=self.candidate_epsilon,
            max_alternatives=self.max_alternatives,
            substitution_penalty=self.substitution_penalty,
            min_retained_confidence=self.min_retained_confidence,
            conflict_penalty=self.conflict_penalty,
            manual_confidence=self.manual_confidence,
        )

    def to_scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(**dict(self.scoring))


class ConfigLoader:
    """Build a MapperConfig from the environment and an optional TOML file."""

    @staticmethod
    def load(config_file: Path | None = None) -> MapperConfig:
        config = MapperConfig.from_env()
        if config_file is None:
            config_file = Path(ConfigFiles.DEFAULT_NAME)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: MapperConfig) -> MapperConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        thresholds = _get_table(data, "thresholds")
        confidence = _get_table(data, "confidence")
        scoring_table = _get_table(data, "scoring")

        overrides: dict[str, object] = {}
        for key in ("phase_a", "phase_b", "min_confidence", "candidate_epsilon"):
            if (value := thresholds.get(key)) is not None:
                name = f"{key}_threshold" if key.startswith("phase_") else key
                overrides[name] = _coerce_float(value, key=f"thresholds.{key}")
        for key, name in _CONFIDENCE_KEYS.items():
            if (value := confidence.get(key)) is not None:
                overrides[name] = _coerce_float(
                    value, key=f"confidence.{key}"
                )
        if (value := thresholds.get("max_alternatives")) is not None:
            overrides["max_alternatives"] = _coerce_int(
                value, key="thresholds.max_alternatives"
            )
        if (value := thresholds.get("sample_size")) is not None:
            overrides["sample_size"] = _coerce_int(value, key="thresholds.sample_size")

        scoring = dict(base_config.scoring)
        for key, value in scoring_table.items():
            scoring[key] = _coerce_float(value, key=f"scoring.{key}")

        current = {f.name: getattr(base_config, f.name) for f in fields(MapperConfig)}
        current.update(overrides)
        current["scoring"] = scoring
        return MapperConfig(**current)  # type: ignore[arg-type]


_CONFIDENCE_KEYS = {
    "relaxed_display_floor": "relaxed_display_floor",
    "forced": "forced_confidence",
    "manual": "manual_confidence",
    "substitution_penalty": "substitution_penalty",
    "min_retained": "min_retained_confidence",
    "conflict_penalty": "conflict_penalty",
    "high": "high_confidence",
    "medium": "medium_confidence",
}


def _scoring_weight_names() -> set[str]:
    return {f.name for f in fields(ScoringWeights)}


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
