"""
Badge evaluation tests
"""

from prompt_valuation_core.domain.entities import (
    DLACalculation,
    EAVPCalculation,
    PRICECalculation,
    PVCCalculation,
    SCOPECalculation,
    ValuationReport,
)
from prompt_valuation_core.domain.value_objects import Badge, QualitativeJudgment
from prompt_valuation_core.use_cases.badges import (
    BADGE_CATALOG,
    BADGE_RULES,
    BadgeRule,
    evaluate_badges,
)


def _report(method, calculations, judgment=None):
    return ValuationReport(
        method=method,
        prompt_text="p",
        prompt_title=None,
        inputs={},
        calculations=calculations,
        timestamp="2026-01-01T00:00:00",
        watermark=f"PV-{method}-000000",
        judgment=judgment,
    )


def _pvc_report(final_score, **scores):
    raw = {"G_r": 3, "C_r": 3, "S_r": 3, "D_r": 3, "F_r": 3, "A_r": 1, "R_r": 1, **scores}
    calculation = PVCCalculation(
        normalized_scores={k[0]: v / 4 for k, v in raw.items()},
        base_quality=final_score,
        quality_after_penalty=final_score,
        token_count=100,
        length_penalty=0.0,
        final_score=final_score,
    )
    return _report("PVC", calculation, QualitativeJudgment(rubric_id="PVC", scores=raw))


def _scope_report(pvi, **scores):
    raw = {"S": 0.5, "H": 0.5, "D": 0.5, "E": 0.5, "Teff": 0.5, **scores}
    return _report(
        "SCOPE",
        SCOPECalculation(pvi=pvi, tier="Market Standard"),
        QualitativeJudgment(rubric_id="SCOPE", scores=raw),
    )


def _dla_report(true_net_value):
    return _report("DLA", DLACalculation(
        total_words=1000, manual_minutes=25, gross_labor_value=100, wait_cost=0,
        reading_cost=0, fixing_cost=0, hidden_friction_cost=100 - true_net_value,
        true_net_value=true_net_value, is_profitable=true_net_value > 0,
        arbitrage_efficiency=true_net_value / 100,
    ))


def _price_report(total_asset_value):
    return _report("PRICE", PRICECalculation(
        human_cost=80, ai_cost=0.05, review_cost=5, operational_cost=5.05,
        net_run_savings=total_asset_value, total_asset_value=total_asset_value,
        freelance_price=total_asset_value * 0.15, marketplace_price=total_asset_value * 0.02,
    ))


def _eavp_report(efficiency_ratio):
    return _report("EAVP", EAVPCalculation(
        manual_creation_minutes=10, correction_tax_minutes=10 - 10 * efficiency_ratio,
        net_minutes_saved=10 * efficiency_ratio, audited_value=10, gross_labor_value=10,
        correction_cost=0, efficiency_ratio=efficiency_ratio, is_net_gain=True,
    ))


def _ids(badges):
    return [b.id for b in badges]


class TestBadgeCatalog:
    def test_every_catalog_badge_has_a_rule(self):
        assert [rule.badge for rule in BADGE_RULES] == list(BADGE_CATALOG)


class TestEvaluateBadges:
    """evaluate_badges() tests"""

    def test_pvc_example(self):
        """final 99 with G_r=4, R_r=0, F_r=4 earns exactly those four badges"""
        report = _pvc_report(99, G_r=4, R_r=0, F_r=4, D_r=3)
        assert _ids(evaluate_badges(report)) == [
            "NEURAL_ALCHEMIST",
            "PRECISION_ENGINEER",
            "SAFE_HARBOR",
            "FEASIBILITY_VERIFIED",
        ]

    def test_pvc_structure_badge(self):
        report = _pvc_report(50, D_r=4)
        assert _ids(evaluate_badges(report)) == ["STRUCTURED_PRO"]

    def test_pvc_threshold_is_inclusive(self):
        assert "NEURAL_ALCHEMIST" in _ids(evaluate_badges(_pvc_report(98)))
        assert "NEURAL_ALCHEMIST" not in _ids(evaluate_badges(_pvc_report(97.9)))

    def test_no_badges(self):
        assert evaluate_badges(_pvc_report(60)) == ()

    def test_dla_threshold_is_strict(self):
        assert _ids(evaluate_badges(_dla_report(50.01))) == ["ROI_TITAN"]
        assert evaluate_badges(_dla_report(50)) == ()

    def test_scope_badges_sorted_by_tier(self):
        report = _scope_report(2.6, Teff=0.95, E=0.05)
        assert _ids(evaluate_badges(report)) == ["SEMANTIC_LEGEND", "SIGNAL_MAESTRO", "CLEAN_SIGNAL"]

    def test_price_badge(self):
        assert _ids(evaluate_badges(_price_report(60_000))) == ["MARKET_DISRUPTOR"]
        assert evaluate_badges(_price_report(50_000)) == ()

    def test_eavp_badge(self):
        assert _ids(evaluate_badges(_eavp_report(0.6))) == ["EFFICIENCY_BOOST"]
        assert evaluate_badges(_eavp_report(0.5)) == ()

    def test_report_only_earns_badges_for_its_method(self):
        """A DLA report never consults PVC rules (it has no judgment)"""
        earned = evaluate_badges(_dla_report(1000))
        assert all("DLA" in rule.methods for rule in BADGE_RULES if rule.badge in earned)

    def test_is_pure(self):
        report = _pvc_report(99, G_r=4, R_r=0, F_r=4)
        assert evaluate_badges(report) == evaluate_badges(report)


class TestCustomRules:
    """The rule contract supports re-ordering and multi-method rules"""

    def test_sorted_by_tier_then_catalog_order(self):
        gold, _, _, _, silver, _, _, _, bronze_a, bronze_b, _, _ = BADGE_CATALOG
        rules = (
            BadgeRule(bronze_b, frozenset({"DLA"}), lambda r: True),
            BadgeRule(silver, frozenset({"DLA"}), lambda r: True),
            BadgeRule(bronze_a, frozenset({"DLA"}), lambda r: True),
            BadgeRule(gold, frozenset({"DLA"}), lambda r: True),
        )
        earned = evaluate_badges(_dla_report(10), rules)
        assert earned == (gold, silver, bronze_a, bronze_b)

    def test_badge_outside_catalog_follows_catalog_badges(self):
        extra = Badge(id="NEW_BADGE", name="New", description="d", tier="Gold", icon="Star")
        gold = BADGE_CATALOG[0]
        rules = (
            BadgeRule(extra, frozenset({"DLA"}), lambda r: True),
            BadgeRule(gold, frozenset({"DLA"}), lambda r: True),
        )
        assert evaluate_badges(_dla_report(10), rules) == (gold, extra)

    def test_multi_method_rule(self):
        badge = BADGE_CATALOG[2]
        rule = BadgeRule(
            badge,
            frozenset({"DLA", "PRICE"}),
            lambda r: getattr(r.calculations, "true_net_value", 0) > 0
            or getattr(r.calculations, "total_asset_value", 0) > 0,
        )
        assert evaluate_badges(_dla_report(10), (rule,)) == (badge,)
        assert evaluate_badges(_price_report(10), (rule,)) == (badge,)
        assert evaluate_badges(_eavp_report(0.9), (rule,)) == ()
