"""Lookup tables for column mapping inference.

The synonym table describes the swimming-competition domain the mapper was
built for: each canonical concept lists the column and field names that are
known to carry it. The table is bidirectional; a concept matches when both
names resolve to it, regardless of which side is the source column.
"""

import re

from ...entities.types import ColumnType

DOMAIN_SYNONYMS: dict[str, tuple[str, ...]] = {
    # Athlete identification
    "name": ("athlete_name", "swimmer_name", "participant", "full_name", "athlete"),
    "athlete": ("name", "swimmer", "participant", "athlete_name", "competitor"),
    "swimmer": ("name", "athlete", "participant", "swimmer_name"),
    # Performance metrics
    "time": ("race_time", "finish_time", "final_time", "duration", "result"),
    "reaction_time": ("start_time", "reaction", "rt", "rt_time"),
    "lap_time": ("split_time", "lap", "intermediate_time", "split"),
    "points": ("score", "fina_points", "rating"),
    # Competition structure
    "heat": ("heat_number", "session", "round"),
    "lane": ("lane_number", "lane_no"),
    "place": ("rank", "position", "finish_position", "ranking"),
    # Event details
    "event": ("event_name", "race", "competition_event"),
    "distance": ("race_distance", "event_distance", "length", "meters"),
    "stroke": ("stroke_type", "style", "swimming_style"),
    # Team and organization
    "team": ("team_name", "club", "organization", "club_name"),
    "country": ("nation", "nationality", "country_code", "noc"),
    # Competition info
    "competition": ("meet", "championship", "competition_name", "meet_name"),
    "venue": ("pool", "facility", "location"),
    "date": ("race_date", "event_date", "competition_date", "day"),
    # Athlete attributes
    "age": ("age_group", "birth_year", "yob"),
    "gender": ("sex", "category"),
}

# Synonym terms shorter than this only match as whole names or whole tokens.
MIN_LOOSE_TERM_LENGTH = 3

TYPE_COMPATIBILITY: dict[ColumnType, dict[ColumnType, float]] = {
    ColumnType.NUMERIC: {
        ColumnType.INTEGER: 0.95,
        ColumnType.MIXED_NUMERIC: 0.9,
        ColumnType.TIME: 0.8,
    },
    ColumnType.MIXED_NUMERIC: {
        ColumnType.NUMERIC: 0.9,
        ColumnType.INTEGER: 0.85,
        ColumnType.TEXT: 0.8,
    },
    ColumnType.TIME: {
        ColumnType.TIMESTAMP: 0.9,
        ColumnType.NUMERIC: 0.85,
        ColumnType.TEXT: 0.8,
    },
    ColumnType.DATE: {
        ColumnType.TIMESTAMP: 0.95,
        ColumnType.TEXT: 0.8,
    },
    ColumnType.TEXT: {
        ColumnType.CATEGORICAL: 0.95,
        ColumnType.DATE: 0.8,
    },
    ColumnType.CATEGORICAL: {
        ColumnType.TEXT: 0.95,
        ColumnType.INTEGER: 0.8,
    },
}

# Pairs that are not listed as compatible but still plausible.
PARTIAL_TYPE_COMPATIBILITY: dict[tuple[ColumnType, ColumnType], float] = {
    (ColumnType.TEXT, ColumnType.NUMERIC): 0.6,
    (ColumnType.MIXED_NUMERIC, ColumnType.CATEGORICAL): 0.6,
}

# Columns without values carry no type evidence.
EMPTY_COLUMN_COMPATIBILITY = 0.9

# Forced assignment preferences: a column matching the first pattern takes the
# first remaining field matching the second one.
FORCED_PRIORITY_PATTERNS: tuple[tuple[re.Pattern[str], re.Pattern[str]], ...] = (
    (re.compile("time|duration|split|lap"), re.compile("time|duration|split|lap")),
    (
        re.compile("name|athlete|swimmer|participant"),
        re.compile("name|athlete|swimmer|participant"),
    ),
    (re.compile("place|rank|position"), re.compile("place|rank|position")),
    (re.compile("date|day"), re.compile("date|day")),
    (re.compile("team|club"), re.compile("team|club")),
    (re.compile("country|nation"), re.compile("country|nation")),
    (re.compile("event|race"), re.compile("event|race")),
)

# Field name patterns used to rate how relevant a target field is to the domain.
DOMAIN_FIELD_PATTERNS: dict[str, tuple[str, ...]] = {
    "dimensions": (
        "name",
        "athlete",
        "swimmer",
        "participant",
        "team",
        "club",
        "country",
        "nation",
        "event",
        "stroke",
        "distance",
        "style",
        "heat",
        "lane",
        "place",
        "rank",
        "position",
        "competition",
        "meet",
        "championship",
        "age_group",
        "category",
        "gender",
        "sex",
        "pool",
        "venue",
        "date",
        "session",
    ),
    "measures": (
        "time",
        "duration",
        "seconds",
        "minutes",
        "reaction_time",
        "split",
        "lap_time",
        "points",
        "score",
        "rating",
        "rank",
        "place",
        "position",
        "distance",
        "length",
        "meters",
        "age",
        "year",
    ),
}

SPORT_TERMS: tuple[str, ...] = (
    "swim",
    "pool",
    "stroke",
    "freestyle",
    "backstroke",
    "butterfly",
    "breaststroke",
)

MEASURE_NAME_PATTERNS: tuple[str, ...] = (
    "time",
    "duration",
    "score",
    "points",
    "count",
    "sum",
    "avg",
    "rate",
)
