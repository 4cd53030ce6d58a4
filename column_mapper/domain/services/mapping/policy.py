from dataclasses import dataclass

from ....constants import Defaults


@dataclass(frozen=True, slots=True)
class AssignmentPolicy:
    """Thresholds shared by the phased assigner and the conflict resolver.

    The floor values are display conventions: they keep low-evidence
    assignments visible without claiming they are good matches.
    """

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

    def __post_init__(self) -> None:
        for name in (
            "phase_a_threshold",
            "phase_b_threshold",
            "relaxed_display_floor",
            "forced_confidence",
            "candidate_epsilon",
            "substitution_penalty",
            "min_retained_confidence",
            "conflict_penalty",
            "manual_confidence",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        if self.phase_b_threshold > self.phase_a_threshold:
            raise ValueError(
                "phase_b_threshold must not exceed phase_a_threshold, "
                f"got {self.phase_b_threshold} > {self.phase_a_threshold}"
            )
        if self.max_alternatives < 0:
            raise ValueError(
                f"max_alternatives must be non-negative, got {self.max_alternatives}"
            )
