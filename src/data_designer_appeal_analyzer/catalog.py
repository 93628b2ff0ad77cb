# Static keyword and weight tables for ticket appeal analysis.
#
# Pure data: categories, factors, and options are addressed by stable ids.
# Display text lives in ``labels``; nothing here is shown to a user verbatim.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

Impact = Literal["high", "medium", "low"]
IssueKind = Literal["vague", "procedural", "contradiction", "omission"]

DEFAULT_VIOLATION_TYPE = "other"
DEFAULT_APPEAL_TYPE = "comprehensive"

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IssueCategory:
    id: str
    keywords: tuple[str, ...]
    impact: Impact
    kind: IssueKind
    description: str


@dataclass(frozen=True)
class Factor:
    id: str
    delta: float


@dataclass(frozen=True)
class ViolationProfile:
    """A violation type: its base appeal success rate, factors, and fine schedule."""

    id: str
    base_rate: float
    factors: tuple[Factor, ...]
    category_ids: tuple[str, ...]
    base_amount: float
    late_multiplier: float
    max_fee: float

    def factor(self, factor_id: str) -> Factor | None:
        for f in self.factors:
            if f.id == factor_id:
                return f
        return None


@dataclass(frozen=True)
class Option:
    value: str
    delta: float


@dataclass(frozen=True)
class AppealDimension:
    id: str
    options: tuple[Option, ...]
    default: str

    def __post_init__(self) -> None:
        if self.option(self.default) is None:
            raise ValueError(f"Dimension {self.id!r} has no default option {self.default!r}.")

    def option(self, value: str) -> Option | None:
        for o in self.options:
            if o.value == value:
                return o
        return None

    @property
    def default_option(self) -> Option:
        return next(o for o in self.options if o.value == self.default)


@dataclass(frozen=True)
class AppealType:
    """Relevance vocabulary for an appeal type.

    Types with ``category_groups`` score relevance by how many distinct groups
    the text touches rather than by a flat term count.
    """

    id: str
    relevance_terms: tuple[str, ...]
    category_groups: tuple[tuple[str, tuple[str, ...]], ...] = ()


# ---------------------------------------------------------------------------
# Issue categories
# ---------------------------------------------------------------------------

ISSUE_CATEGORIES: tuple[IssueCategory, ...] = (
    IssueCategory(
        "vague_language",
        ("approximately", "estimated", "estimate", "high rate of speed", "appeared to",
         "seemed", "roughly", "in excess of", "excessive speed"),
        "high", "vague",
        "Imprecise wording used in place of a measured value.",
    ),
    IssueCategory(
        "visual_estimation",
        ("visually", "visual estimate", "paced", "pacing", "observed", "eyeballed"),
        "medium", "procedural",
        "Speed or position judged by eye or by pacing instead of a measurement.",
    ),
    IssueCategory(
        "equipment_reliability",
        ("radar", "lidar", "laser", "speed gun", "device", "unit", "camera"),
        "high", "omission",
        "Measurement relied on equipment whose calibration is not documented.",
    ),
    IssueCategory(
        "visibility_conditions",
        ("dark", "night", "rain", "raining", "fog", "glare", "obstructed", "heavy traffic", "dusk"),
        "medium", "contradiction",
        "Conditions that limited what the officer could see.",
    ),
    IssueCategory(
        "identification",
        ("similar vehicle", "lost sight", "unable to read", "partial plate", "could not confirm",
         "believed to be"),
        "high", "contradiction",
        "Uncertain identification of the vehicle or driver.",
    ),
    IssueCategory(
        "signage",
        ("sign", "signs", "signage", "posted", "marked", "markings", "curb", "meter"),
        "high", "omission",
        "The restriction depends on signs or markings the statement does not describe.",
    ),
    IssueCategory(
        "signal_timing",
        ("yellow", "amber", "just turned", "changed to red", "turning red"),
        "high", "procedural",
        "Signal phase timing at the moment of entry is in question.",
    ),
    IssueCategory(
        "stop_observation",
        ("rolling stop", "slowed", "did not come to a complete stop", "limit line", "crosswalk"),
        "medium", "vague",
        "The stop was judged without a clear reference point.",
    ),
    IssueCategory(
        "procedural_gap",
        ("failed to", "did not record", "no record", "not recorded", "unsigned", "handwritten",
         "later noted"),
        "medium", "procedural",
        "Required steps in issuing the citation were skipped or documented late.",
    ),
    IssueCategory(
        "subjective_opinion",
        ("i believe", "in my opinion", "i think", "it appeared", "felt"),
        "low", "vague",
        "Personal impression offered as fact.",
    ),
)

ISSUE_CATEGORIES_BY_ID: dict[str, IssueCategory] = {c.id: c for c in ISSUE_CATEGORIES}

# ---------------------------------------------------------------------------
# Violation profiles
# ---------------------------------------------------------------------------

VIOLATION_PROFILES: tuple[ViolationProfile, ...] = (
    ViolationProfile(
        id="speeding",
        base_rate=0.40,
        factors=(
            Factor("equipment_error", 0.20),
            Factor("no_calibration_record", 0.25),
            Factor("visual_estimate_only", 0.15),
            Factor("heavy_traffic", 0.05),
            Factor("emergency", 0.10),
            Factor("radar_confirmed", -0.15),
            Factor("excessive_speed", -0.20),
        ),
        category_ids=("vague_language", "visual_estimation", "equipment_reliability",
                      "visibility_conditions", "identification", "procedural_gap",
                      "subjective_opinion"),
        base_amount=150.0, late_multiplier=1.75, max_fee=350.0,
    ),
    ViolationProfile(
        id="red_light",
        base_rate=0.55,
        factors=(
            Factor("short_yellow", 0.25),
            Factor("camera_malfunction", 0.20),
            Factor("identity_uncertainty", 0.15),
            Factor("emergency", 0.10),
            Factor("clear_video", -0.20),
        ),
        category_ids=("signal_timing", "equipment_reliability", "identification",
                      "visibility_conditions", "vague_language", "procedural_gap"),
        base_amount=100.0, late_multiplier=1.5, max_fee=200.0,
    ),
    ViolationProfile(
        id="stop_sign",
        base_rate=0.45,
        factors=(
            Factor("sign_obstructed", 0.25),
            Factor("complete_stop_witness", 0.20),
            Factor("officer_view_blocked", 0.15),
            Factor("no_limit_line", 0.10),
            Factor("prior_warning", -0.10),
        ),
        category_ids=("stop_observation", "signage", "visibility_conditions", "vague_language",
                      "subjective_opinion", "procedural_gap"),
        base_amount=120.0, late_multiplier=1.5, max_fee=240.0,
    ),
    ViolationProfile(
        id="parking",
        base_rate=0.65,
        factors=(
            Factor("signage", 0.25),
            Factor("meter_malfunction", 0.20),
            Factor("valid_permit_displayed", 0.30),
            Factor("ticket_details_wrong", 0.15),
            Factor("loading_in_progress", 0.05),
            Factor("repeat_location", -0.10),
            Factor("photo_by_officer", -0.15),
        ),
        category_ids=("signage", "identification", "procedural_gap", "vague_language",
                      "subjective_opinion"),
        base_amount=60.0, late_multiplier=1.5, max_fee=120.0,
    ),
    ViolationProfile(
        id="no_permit",
        base_rate=0.70,
        factors=(
            Factor("permit_displayed", 0.30),
            Factor("permit_zone_unmarked", 0.20),
            Factor("permit_recently_expired", -0.05),
        ),
        category_ids=("signage", "identification", "procedural_gap", "vague_language"),
        base_amount=45.0, late_multiplier=1.5, max_fee=90.0,
    ),
    ViolationProfile(
        id="handicapped",
        base_rate=0.20,
        factors=(
            Factor("placard_displayed", 0.30),
            Factor("space_unmarked", 0.25),
            Factor("placard_fell", 0.15),
            Factor("no_placard", -0.20),
        ),
        category_ids=("signage", "identification", "procedural_gap", "vague_language"),
        base_amount=250.0, late_multiplier=1.5, max_fee=500.0,
    ),
    ViolationProfile(
        id=DEFAULT_VIOLATION_TYPE,
        base_rate=0.50,
        factors=(
            Factor("officer_procedure", 0.15),
            Factor("identity_uncertainty", 0.15),
            Factor("vague_statement", 0.10),
            Factor("extenuating_circumstance", 0.10),
            Factor("no_evidence_offered", -0.10),
        ),
        category_ids=tuple(c.id for c in ISSUE_CATEGORIES),
        base_amount=100.0, late_multiplier=1.5, max_fee=200.0,
    ),
)

VIOLATION_PROFILES_BY_ID: dict[str, ViolationProfile] = {p.id: p for p in VIOLATION_PROFILES}

# ---------------------------------------------------------------------------
# Appeal dimensions
# ---------------------------------------------------------------------------

APPEAL_DIMENSIONS: tuple[AppealDimension, ...] = (
    AppealDimension(
        "evidence_strength",
        (Option("none", -0.10), Option("some", 0.0), Option("strong", 0.10), Option("conclusive", 0.15)),
        default="some",
    ),
    AppealDimension(
        "appeal_timeliness",
        (Option("late", -0.15), Option("on_time", 0.0), Option("early", 0.05)),
        default="on_time",
    ),
    AppealDimension(
        "prior_record",
        (Option("repeat", -0.10), Option("unknown", 0.0), Option("clean", 0.05)),
        default="unknown",
    ),
    AppealDimension(
        "jurisdiction",
        (Option("strict", -0.05), Option("typical", 0.0), Option("lenient", 0.10)),
        default="typical",
    ),
)

APPEAL_DIMENSIONS_BY_ID: dict[str, AppealDimension] = {d.id: d for d in APPEAL_DIMENSIONS}

# ---------------------------------------------------------------------------
# Appeal types
# ---------------------------------------------------------------------------

APPEAL_TYPES: tuple[AppealType, ...] = (
    AppealType(
        "procedural",
        ("procedure", "process", "notice", "notification", "issued", "served", "delivery", "mail",
         "email", "dated", "deadline", "timeframe", "period"),
    ),
    AppealType(
        "factual",
        ("fact", "evidence", "actually", "incorrect", "inaccurate", "wrong", "error", "location",
         "time", "date", "place", "vehicle", "registration", "photograph", "witness"),
    ),
    AppealType(
        "legal",
        ("law", "regulation", "code", "section", "statute", "ordinance", "legal", "legislation",
         "jurisdiction", "authority", "court", "precedent", "rights"),
    ),
    AppealType(
        DEFAULT_APPEAL_TYPE,
        (),
        category_groups=(
            ("procedural", ("procedure", "process", "notice")),
            ("factual", ("fact", "evidence", "incorrect")),
            ("legal", ("law", "regulation", "code")),
        ),
    ),
)

APPEAL_TYPES_BY_ID: dict[str, AppealType] = {t.id: t for t in APPEAL_TYPES}

# ---------------------------------------------------------------------------
# Lookups: unknown ids fall back and leave a diagnostic behind
# ---------------------------------------------------------------------------


def note_diagnostic(diagnostics: list[str], message: str) -> None:
    logger.warning(message)
    diagnostics.append(message)


def resolve_violation_profile(violation_type: str | None, diagnostics: list[str]) -> ViolationProfile:
    profile = VIOLATION_PROFILES_BY_ID.get(violation_type or "")
    if profile is None:
        note_diagnostic(diagnostics, f"Unknown violation type {violation_type!r}; using {DEFAULT_VIOLATION_TYPE!r}.")
        profile = VIOLATION_PROFILES_BY_ID[DEFAULT_VIOLATION_TYPE]
    return profile


def resolve_appeal_type(appeal_type: str | None, diagnostics: list[str]) -> AppealType:
    resolved = APPEAL_TYPES_BY_ID.get(appeal_type or "")
    if resolved is None:
        note_diagnostic(diagnostics, f"Unknown appeal type {appeal_type!r}; using {DEFAULT_APPEAL_TYPE!r}.")
        resolved = APPEAL_TYPES_BY_ID[DEFAULT_APPEAL_TYPE]
    return resolved


def resolve_factors(profile: ViolationProfile, factor_ids, diagnostics: list[str]) -> list[Factor]:
    """Selected factors in catalog order; duplicates collapse, unknown ids are dropped."""
    wanted = set()
    for factor_id in factor_ids or ():
        if profile.factor(factor_id) is None:
            note_diagnostic(diagnostics, f"Unknown factor {factor_id!r} for violation type {profile.id!r}; ignored.")
            continue
        wanted.add(factor_id)
    return [f for f in profile.factors if f.id in wanted]


def resolve_options(selections, diagnostics: list[str]) -> list[tuple[AppealDimension, Option]]:
    """One option per dimension; dimensions left out take their default option."""
    selections = dict(selections or {})
    for dimension_id in selections:
        if dimension_id not in APPEAL_DIMENSIONS_BY_ID:
            note_diagnostic(diagnostics, f"Unknown appeal dimension {dimension_id!r}; ignored.")

    chosen: list[tuple[AppealDimension, Option]] = []
    for dimension in APPEAL_DIMENSIONS:
        value = selections.get(dimension.id)
        option = dimension.option(value) if value is not None else dimension.default_option
        if option is None:
            note_diagnostic(diagnostics, f"Unknown option {value!r} for dimension {dimension.id!r}; using {dimension.default!r}.")
            option = dimension.default_option
        chosen.append((dimension, option))
    return chosen


def categories_for(profile: ViolationProfile) -> tuple[IssueCategory, ...]:
    return tuple(ISSUE_CATEGORIES_BY_ID[c] for c in profile.category_ids)
