"""
Badge Evaluation

Stateless rules engine that picks the badges a completed report has earned.
"""

from dataclasses import dataclass
from typing import Callable

from prompt_valuation_core.domain.constants import BADGE_DEFINITIONS, BADGE_TIERS
from prompt_valuation_core.domain.entities import ValuationReport
from prompt_valuation_core.domain.value_objects import Badge

BADGE_CATALOG: tuple[Badge, ...] = tuple(Badge(**definition) for definition in BADGE_DEFINITIONS)

_BADGES_BY_ID = {badge.id: badge for badge in BADGE_CATALOG}
_TIER_ORDER = {tier: index for index, tier in enumerate(BADGE_TIERS)}
_CATALOG_ORDER = {badge.id: index for index, badge in enumerate(BADGE_CATALOG)}


@dataclass(frozen=True)
class BadgeRule:
    """
    Eligibility rule for one catalog badge

    The predicate receives the whole report, so a rule listing several methods
    may read fields from any of those report types.
    """
    badge: Badge
    methods: frozenset[str]
    predicate: Callable[[ValuationReport], bool]


def _rule(badge_id: str, methods: set[str], predicate: Callable[[ValuationReport], bool]) -> BadgeRule:
    return BadgeRule(badge=_BADGES_BY_ID[badge_id], methods=frozenset(methods), predicate=predicate)


BADGE_RULES: tuple[BadgeRule, ...] = (
    # Gold
    _rule("NEURAL_ALCHEMIST", {"PVC"}, lambda r: r.calculations.final_score >= 98),
    _rule("BULLETPROOF_LOGIC", {"VECTOR"}, lambda r: r.calculations.q > 0.95),
    _rule("ROI_TITAN", {"DLA"}, lambda r: r.calculations.true_net_value > 50),
    _rule("SEMANTIC_LEGEND", {"SCOPE"}, lambda r: r.calculations.pvi > 2.5),
    # Silver
    _rule("PRECISION_ENGINEER", {"PVC"}, lambda r: r.judgment["G_r"] == 4),
    _rule("SIGNAL_MAESTRO", {"SCOPE"}, lambda r: r.judgment["Teff"] > 0.9),
    _rule("MARKET_DISRUPTOR", {"PRICE"}, lambda r: r.calculations.total_asset_value > 50_000),
    _rule("STRUCTURED_PRO", {"PVC"}, lambda r: r.judgment["D_r"] == 4),
    # Bronze
    _rule("SAFE_HARBOR", {"PVC"}, lambda r: r.judgment["R_r"] == 0),
    _rule("FEASIBILITY_VERIFIED", {"PVC"}, lambda r: r.judgment["F_r"] == 4),
    _rule("EFFICIENCY_BOOST", {"EAVP"}, lambda r: r.calculations.efficiency_ratio > 0.5),
    _rule("CLEAN_SIGNAL", {"SCOPE"}, lambda r: r.judgment["E"] < 0.1),
)


def evaluate_badges(
    report: ValuationReport,
    rules: tuple[BadgeRule, ...] = BADGE_RULES,
) -> tuple[Badge, ...]:
    """
    Return the badges the report has earned, sorted Gold -> Silver -> Bronze

    Badges within a tier keep catalog declaration order.

    Args:
        report: A completed valuation report
        rules: Rule set (defaults to the built-in catalog rules)

    Returns:
        Tuple of earned badges
    """
    earned = [
        rule.badge
        for rule in rules
        if report.method in rule.methods and rule.predicate(report)
    ]
    # Badges outside the catalog sort after catalog badges of the same tier, in rule order
    return tuple(sorted(
        earned,
        key=lambda badge: (_TIER_ORDER[badge.tier], _CATALOG_ORDER.get(badge.id, len(_CATALOG_ORDER))),
    ))
