"""Mapping services for source column to target field suggestion.

This package provides the core business logic: a cascading match scorer,
candidate ranking, phased greedy assignment, conflict resolution and summary
statistics.
"""

from .candidates import generate_candidates
from .conflict_resolver import ConflictResolver, validate_assignments
from .engine import MappingEngine, coerce_records
from .phased_assigner import PhasedAssigner
from .policy import AssignmentPolicy
from .scorer import MatchScorer, ScoringWeights
from .summary import summarize

__all__ = [
    "AssignmentPolicy",
    "ConflictResolver",
    "MappingEngine",
    "MatchScorer",
    "PhasedAssigner",
    "ScoringWeights",
    "coerce_records",
    "generate_candidates",
    "summarize",
    "validate_assignments",
]
