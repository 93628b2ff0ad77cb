# Illustrative regulation excerpts and legal argument templates.
#
# Entries are addressed by stable ids; titles, descriptions, and texts live in
# ``labels`` under ``regulation.<id>.*`` and ``argument.<id>.*``.

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from data_designer_appeal_analyzer.catalog import VIOLATION_PROFILES_BY_ID, note_diagnostic
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.labels import DEFAULT_LOCALE, render, resolve_locale

logger = logging.getLogger(__name__)

GENERAL = "general"

JURISDICTIONS = ("california", "new_york", "texas", "florida", "illinois", "pennsylvania", "federal")

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Regulation:
    id: str
    code: str
    jurisdiction: str
    category: str
    relevance: int
    source: str
    url: str
    last_updated: str


@dataclass(frozen=True)
class RegulationHit:
    regulation: Regulation
    title: str
    description: str
    full_text: str
    score: int

    def to_payload(self) -> dict[str, object]:
        r = self.regulation
        return {
            "id": r.id,
            "code": r.code,
            "title": self.title,
            "description": self.description,
            "full_text": self.full_text,
            "jurisdiction": r.jurisdiction,
            "category": r.category,
            "relevance": r.relevance,
            "score": self.score,
            "source": r.source,
            "url": r.url,
            "last_updated": r.last_updated,
        }


@dataclass(frozen=True)
class RegulationSearch:
    query: str
    hits: tuple[RegulationHit, ...]
    diagnostics: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "query": self.query,
            "hits": [h.to_payload() for h in self.hits],
            "diagnostics": list(self.diagnostics),
        }


@dataclass(frozen=True)
class ArgumentTemplate:
    id: str
    group: str
    success_rate: int
    precedent_case: str | None = None


@dataclass(frozen=True)
class LegalArgument:
    id: str
    title: str
    description: str
    legal_reference: str
    precedent_case: str | None
    success_rate: int
    appeal_text: str

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "legal_reference": self.legal_reference,
            "precedent_case": self.precedent_case,
            "success_rate": self.success_rate,
            "appeal_text": self.appeal_text,
        }


@dataclass(frozen=True)
class ArgumentSet:
    violation_type: str
    group: str
    arguments: tuple[LegalArgument, ...]
    diagnostics: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "violation_type": self.violation_type,
            "group": self.group,
            "arguments": [a.to_payload() for a in self.arguments],
            "diagnostics": list(self.diagnostics),
        }


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

REGULATIONS: tuple[Regulation, ...] = (
    Regulation(
        "ca-park-1", "CVC §22500", "california", "parking", 95, "California Vehicle Code",
        "https://leginfo.legislature.ca.gov/faces/codes_displaySection.xhtml?lawCode=VEH&sectionNum=22500",
        "2023-01-15",
    ),
    Regulation(
        "ny-park-1", "NYC §4-08(d)", "new_york", "parking", 90, "NYC Traffic Rules and Regulations",
        "https://www.nyc.gov/html/dot/downloads/pdf/trafrule.pdf",
        "2022-11-30",
    ),
    Regulation(
        "tx-speed-1", "TTC §545.352", "texas", "speeding", 92, "Texas Transportation Code",
        "https://statutes.capitol.texas.gov/Docs/TN/htm/TN.545.htm#545.352",
        "2023-03-10",
    ),
    Regulation(
        "fl-speed-1", "FSS §316.183", "florida", "speeding", 88, "Florida Statutes",
        "http://www.leg.state.fl.us/statutes/index.cfm?App_mode=Display_Statute&URL=0300-0399/0316/Sections/0316.183.html",
        "2022-09-25",
    ),
    Regulation(
        "il-red-1", "ILCS 5/11-306", "illinois", "red_light", 94, "Illinois Compiled Statutes",
        "https://www.ilga.gov/legislation/ilcs/fulltext.asp?DocName=062500050K11-306",
        "2023-02-18",
    ),
    Regulation(
        "fed-proc-1", "28 U.S.C. §2461", "federal", GENERAL, 80, "United States Code",
        "https://www.law.cornell.edu/uscode/text/28/2461",
        "2022-08-15",
    ),
)

REGULATION_CATEGORIES = frozenset(r.category for r in REGULATIONS)

ARGUMENT_TEMPLATES: tuple[ArgumentTemplate, ...] = (
    ArgumentTemplate("p1", "parking", 78, "Martinez v. City of Los Angeles (2018)"),
    ArgumentTemplate("p2", "parking", 82),
    ArgumentTemplate("s1", "speeding", 65, "State v. Jenkins (2019)"),
    ArgumentTemplate("s2", "speeding", 58),
    ArgumentTemplate("r1", "red_light", 74, "Williams v. Department of Transportation (2020)"),
    ArgumentTemplate("g1", GENERAL, 71),
)

ARGUMENT_GROUPS = frozenset(t.group for t in ARGUMENT_TEMPLATES)

# ---------------------------------------------------------------------------
# Regulation search
# ---------------------------------------------------------------------------


def _regulation_hit(regulation: Regulation, locale: str) -> RegulationHit:
    def text(field: str) -> str:
        return render(f"regulation.{regulation.id}.{field}", locale)

    return RegulationHit(regulation, text("title"), text("description"), text("full_text"), regulation.relevance)


def find_regulations(
    query: str | None = "",
    jurisdiction: str | None = None,
    violation_type: str | None = None,
    locale: str = DEFAULT_LOCALE,
    hyperparameters: Hyperparameters | None = None,
) -> RegulationSearch:
    """Search the regulation excerpts, most relevant first.

    A violation type with its own excerpts narrows the search to them; any
    other type searches every excerpt. A query keeps only entries whose title,
    description, code, or full text contain it (case-insensitive), and entries
    matching in the title or code rank higher.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    diagnostics: list[str] = []
    locale = resolve_locale(locale, diagnostics)

    if violation_type and violation_type in REGULATION_CATEGORIES:
        pool = [r for r in REGULATIONS if r.category == violation_type]
    else:
        if violation_type and violation_type not in VIOLATION_PROFILES_BY_ID:
            note_diagnostic(diagnostics, f"Unknown violation type {violation_type!r}; searching all regulations.")
        pool = list(REGULATIONS)

    if jurisdiction:
        if jurisdiction not in JURISDICTIONS:
            note_diagnostic(diagnostics, f"Unknown jurisdiction {jurisdiction!r}.")
        pool = [r for r in pool if r.jurisdiction == jurisdiction]

    hits = [_regulation_hit(r, locale) for r in pool]
    needle = (query or "").strip().lower()
    if needle:
        ranked = []
        for hit in hits:
            if needle in hit.title.lower() or needle in hit.regulation.code.lower():
                ranked.append(replace(hit, score=hit.score + hp.regulation_match_boost))
            elif needle in hit.description.lower() or needle in hit.full_text.lower():
                ranked.append(hit)
        hits = ranked

    hits.sort(key=lambda h: -h.score)
    logger.debug(f"Regulation search {needle!r}: {len(hits)} of {len(REGULATIONS)} entries")
    return RegulationSearch(query=needle, hits=tuple(hits), diagnostics=tuple(diagnostics))


# ---------------------------------------------------------------------------
# Legal arguments
# ---------------------------------------------------------------------------


def resolve_argument_group(violation_type: str | None, diagnostics: list[str]) -> str:
    """Argument group for a violation type; types without their own arguments use ``general``."""
    if violation_type in ARGUMENT_GROUPS:
        return violation_type
    if violation_type not in VIOLATION_PROFILES_BY_ID:
        note_diagnostic(diagnostics, f"Unknown violation type {violation_type!r}; using {GENERAL!r} arguments.")
    return GENERAL


def legal_arguments(violation_type: str | None, locale: str = DEFAULT_LOCALE) -> ArgumentSet:
    """Argument templates for contesting a violation, with their historical success rates."""
    diagnostics: list[str] = []
    locale = resolve_locale(locale, diagnostics)
    group = resolve_argument_group(violation_type, diagnostics)

    arguments = []
    for t in ARGUMENT_TEMPLATES:
        if t.group != group:
            continue
        arguments.append(LegalArgument(
            id=t.id,
            title=render(f"argument.{t.id}.title", locale),
            description=render(f"argument.{t.id}.description", locale),
            legal_reference=render(f"argument.{t.id}.reference", locale),
            precedent_case=t.precedent_case,
            success_rate=t.success_rate,
            appeal_text=render(f"argument.{t.id}.appeal_text", locale),
        ))

    return ArgumentSet(
        violation_type=violation_type or "",
        group=group,
        arguments=tuple(arguments),
        diagnostics=tuple(diagnostics),
    )
