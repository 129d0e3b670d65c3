"""Unit tests for risk rule evaluation and risk scoring.

Tests cover:
- Each substring rule and its category gate
- Negative condition for optional arbitration
- Finding order
- Score weights, clamping, level branches and summaries
"""

import pytest

from contract_clarity.config.clause_rules import ClauseRules, RiskLevel, Severity
from contract_clarity.services.clause_matcher import ClauseMatcher
from contract_clarity.services.data_models import RiskFinding
from contract_clarity.services.risk_evaluator import RiskRuleEvaluator
from contract_clarity.services.risk_scorer import calculate_risk_score


def titles_for(text: str):
    evaluator = RiskRuleEvaluator(matcher=ClauseMatcher())
    return [finding.title for finding in evaluator.evaluate(text.lower())]


def finding(severity: Severity) -> RiskFinding:
    return RiskFinding(severity=severity, title="t", description="d", recommendation="r")


class TestRiskRules:
    """Tests for RiskRuleEvaluator.evaluate."""

    def test_no_findings_for_neutral_text(self):
        """Text without triggers yields no findings."""
        assert titles_for("The quick brown fox jumps over the lazy dog.") == []

    def test_at_will(self):
        """At-will wording is flagged without any category gate."""
        assert titles_for("Employment is at-will.") == ["At-Will Employment"]
        assert titles_for("This may lead to immediate termination.") == ["At-Will Employment"]

    def test_non_compete_is_unconditional_on_keyword_hit(self):
        """Any non-compete keyword raises the high finding."""
        evaluator = RiskRuleEvaluator(matcher=ClauseMatcher())
        findings = evaluator.evaluate("you agree not to join a competing firm.")
        assert [(f.title, f.severity) for f in findings] == [("Non-Compete Restrictions", Severity.HIGH)]
        assert findings[0].description == ClauseRules.NON_COMPETE.description

    def test_overtime_exemption(self):
        """Exempt wording is flagged."""
        assert titles_for("The role is salaried exempt.") == ["Overtime Exemption"]

    def test_probation_rules_require_probation_keyword(self):
        """Probation findings fire only when probation is mentioned."""
        assert titles_for("There are reduced benefits for new staff.") == []
        assert titles_for("During probation there are reduced benefits.") == ["Probation Period Benefits"]
        assert titles_for("The company may terminate during probation.") == ["Probation Termination Terms"]

    def test_intellectual_property_rules(self):
        """Broad assignment and prior invention findings share the IP gate."""
        text = "You assign all rights to every invention and must list each prior invention."
        assert titles_for(text) == ["Broad IP Assignment", "Prior Inventions Disclosure"]

    def test_indefinite_non_solicitation(self):
        """Indefinite wording upgrades the non-solicitation finding."""
        assert titles_for("You shall not poach staff.") == ["Non-Solicitation Restrictions"]
        assert titles_for("You shall never poach staff, forever.") == ["Indefinite Non-Solicitation"]

    def test_relocation_rules(self):
        """Mandatory relocation and clawback are independent checks."""
        assert titles_for("You must relocate if asked.") == ["Mandatory Relocation"]
        clawback = "A relocation package is offered; you must repay it if you leave."
        assert titles_for(clawback) == ["Relocation Clawback"]

    def test_clawback_needs_repayment_wording(self):
        """Relocation assistance alone is not a clawback."""
        assert titles_for("A relocation package is offered.") == []

    def test_arbitration(self):
        """Arbitration is flagged unless it is optional."""
        assert titles_for("Claims go to arbitration.") == ["Mandatory Arbitration"]
        assert titles_for("Claims go to arbitration. This is optional arbitration.") == []

    def test_rights_waiver(self):
        """Waiver wording is flagged."""
        assert titles_for("You waive the right to a jury.") == ["Rights Waiver Language"]

    def test_finding_order(self):
        """Findings follow the fixed rule order, not text order."""
        text = "Claims go to arbitration. Employment is at will. A non-compete applies."
        assert titles_for(text) == ["At-Will Employment", "Non-Compete Restrictions", "Mandatory Arbitration"]


class TestRiskScore:
    """Tests for calculate_risk_score."""

    def test_empty_findings(self):
        """No findings is a zero, low-risk score."""
        score = calculate_risk_score([])
        assert score.score == 0
        assert score.level == RiskLevel.LOW
        assert score.summary.startswith("No significant risk areas were detected")

    @pytest.mark.parametrize(
        "severities, expected_score, expected_level",
        [
            ([Severity.LOW], 5, RiskLevel.LOW),
            ([Severity.MEDIUM], 15, RiskLevel.LOW),
            ([Severity.MEDIUM, Severity.MEDIUM], 30, RiskLevel.MODERATE),
            ([Severity.HIGH], 25, RiskLevel.MODERATE),
            ([Severity.HIGH, Severity.HIGH], 50, RiskLevel.HIGH),
            ([Severity.HIGH, Severity.MEDIUM, Severity.LOW], 45, RiskLevel.HIGH),
            ([Severity.HIGH] * 3, 75, RiskLevel.CRITICAL),
            ([Severity.MEDIUM] * 5, 75, RiskLevel.CRITICAL),
            ([Severity.HIGH] * 6, 100, RiskLevel.CRITICAL),
        ],
    )
    def test_score_and_level(self, severities, expected_score, expected_level):
        """Weighted sum, clamped at 100, banded by the ordered level rules."""
        score = calculate_risk_score([finding(severity) for severity in severities])
        assert score.score == expected_score
        assert score.level == expected_level

    def test_summaries(self):
        """Summaries interpolate counts with singular and plural forms."""
        critical = calculate_risk_score([finding(Severity.HIGH)] * 3)
        assert critical.summary.startswith("This contract contains 3 high-severity concerns that require careful review")

        moderate = calculate_risk_score([finding(Severity.HIGH)])
        assert moderate.summary == (
            "This contract has some areas worth reviewing. The 1 identified item are common but should be understood."
        )

        low = calculate_risk_score([finding(Severity.LOW)])
        assert low.summary == "This contract appears relatively straightforward with 1 minor consideration."

    def test_to_dict(self):
        """Levels serialize to their string values."""
        assert calculate_risk_score([]).to_dict()["level"] == "low"
