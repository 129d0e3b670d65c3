"""Unit tests for the analysis pipeline.

Tests cover:
- End-to-end clause, risk and score results for representative contracts
- Custom clause rules passed alongside the text
- Determinism and robustness for arbitrary input
- Document reports, with and without a remote classifier
"""

from datetime import timedelta

import pytest

import contract_clarity
from contract_clarity.config.clause_rules import ClauseCategory, ConfidenceTier, RiskLevel, Severity
from contract_clarity.config.date_patterns import DateType
from contract_clarity.exceptions import ClassifierUnavailableError
from contract_clarity.services.contract_analyzer import ContractAnalyzer
from contract_clarity.services.data_models import ClassificationResult, CustomClauseRule


@pytest.fixture
def analyzer() -> ContractAnalyzer:
    return ContractAnalyzer()


class StubClassifier:
    """Classifier double returning fixed categories per sentence."""

    def __init__(self, category=ClauseCategory.CONFIDENTIALITY, error=None):
        self.category = category
        self.error = error
        self.calls = 0

    def batch_classify(self, sentences):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return [ClassificationResult(sentence=s, category=self.category, confidence=0.8) for s in sentences]


class TestAnalyze:
    """Tests for ContractAnalyzer.analyze."""

    def test_salary_and_non_compete(self, analyzer):
        """A short contract with pay and a non-compete is moderate risk."""
        text = "Your salary is $50,000. There is a non-compete clause preventing competing work for 2 years."
        result = analyzer.analyze(text)

        assert [(c.category, c.confidence, len(c.sentences)) for c in result.clauses] == [
            (ClauseCategory.COMPENSATION, ConfidenceTier.WEAK, 1),
            (ClauseCategory.NON_COMPETE, ConfidenceTier.WEAK, 1),
        ]
        assert [(r.title, r.severity) for r in result.risk_areas] == [("Non-Compete Restrictions", Severity.HIGH)]
        assert result.risk_score.score == 25
        assert result.risk_score.level == RiskLevel.MODERATE

    def test_unrecognized_text(self, analyzer):
        """Text without keywords yields the placeholder and no risk."""
        result = analyzer.analyze("The quick brown fox jumps over the lazy dog.")

        assert [(c.category, c.title, c.confidence) for c in result.clauses] == [
            (ClauseCategory.OTHER, "General Contract Content", ConfidenceTier.WEAK),
        ]
        assert result.risk_areas == []
        assert result.risk_score.score == 0
        assert result.risk_score.level == RiskLevel.LOW
        assert result.risk_score.summary.startswith("No significant risk areas were detected")

    def test_three_high_findings_are_critical(self, analyzer):
        text = (
            "The employee signs a non-compete agreement. "
            "The employee must relocate when asked. "
            "All inventions are company property under this intellectual property clause."
        )
        result = analyzer.analyze(text)

        assert sum(1 for r in result.risk_areas if r.severity == Severity.HIGH) == 3
        assert result.risk_score.level == RiskLevel.CRITICAL

    def test_optional_arbitration_is_not_flagged(self, analyzer):
        text = "Disputes may go to arbitration. Either side may choose optional arbitration instead of court."
        result = analyzer.analyze(text)

        assert "Mandatory Arbitration" not in [r.title for r in result.risk_areas]
        assert ClauseCategory.DISPUTE_RESOLUTION in [c.category for c in result.clauses]

    def test_empty_text(self, analyzer):
        result = analyzer.analyze("")
        assert result.clauses[0].title == "General Contract Content"
        assert result.risk_score.score == 0

    def test_none_text(self, analyzer):
        assert analyzer.analyze(None).risk_score.score == 0

    def test_is_deterministic(self, analyzer):
        """Repeated analysis of the same input is identical."""
        text = "Employment is at will. Your salary is fixed. Claims go to arbitration."
        assert analyzer.analyze(text).to_dict() == analyzer.analyze(text).to_dict()

    def test_score_matches_findings(self, analyzer):
        text = "Employment is at will. You waive all claims. Claims go to arbitration. A non-compete applies."
        result = analyzer.analyze(text)
        weights = {Severity.HIGH: 25, Severity.MEDIUM: 15, Severity.LOW: 5}
        assert result.risk_score.score == min(100, sum(weights[r.severity] for r in result.risk_areas))


class TestCustomRules:
    """Tests for custom rules passed to analyze."""

    def test_custom_clause_follows_built_in_clauses(self, analyzer):
        text = "Your salary is fixed. Employees must wear a uniform at work."
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"], risk_level=Severity.HIGH)
        result = analyzer.analyze(text, custom_rules=[rule])

        assert [c.title for c in result.clauses] == ["Compensation Clause", "Dress Code"]
        assert result.risk_areas[-1].title == "Dress Code - Custom Clause"
        assert result.risk_score.score == 25

    def test_placeholder_precedes_custom_clause(self, analyzer):
        """The placeholder is decided before custom rules are applied."""
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"])
        result = analyzer.analyze("Employees must wear a uniform at work.", custom_rules=[rule])

        assert [c.title for c in result.clauses] == ["General Contract Content", "Dress Code"]

    def test_rules_do_not_leak_between_calls(self, analyzer):
        text = "Employees must wear a uniform at work."
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"])
        analyzer.analyze(text, custom_rules=[rule])
        assert [c.title for c in analyzer.analyze(text).clauses] == ["General Contract Content"]

    def test_high_risk_rule_never_lowers_score(self, analyzer):
        """Adding a matching high-risk rule only raises or keeps the score."""
        text = "Your salary is fixed. A non-compete applies. Employees must wear a uniform at work."
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"], risk_level=Severity.HIGH)

        baseline = analyzer.analyze(text).risk_score.score
        with_rule = analyzer.analyze(text, custom_rules=[rule]).risk_score.score

        assert with_rule >= baseline
        assert with_rule == min(100, baseline + 25)


class TestRobustness:
    """Analysis returns a usable result for any text."""

    @pytest.mark.parametrize(
        "text",
        [
            "\x00\x07\x1b salary \x7f control characters \x0c",
            "no punctuation at all just words about salary arbitration and a non-compete",
            "salary and overtime " * 20000,
            "." * 5000,
            "Señor émoji 🙂 contract - naïve “quotes” and tabs\t\t\there.",
            "The probationary period of 9999999999 days applies. Notice period of 200000 months.",
        ],
    )
    def test_never_raises(self, analyzer, text, now):
        result = analyzer.analyze(text)

        assert len(result.clauses) >= 1
        assert 0 <= result.risk_score.score <= 100

        report = analyzer.analyze_document(text, file_name="offer.txt", file_type="txt", now=now)
        assert len(report.analysis.clauses) >= 1

    def test_explicit_zero_limits_are_kept(self):
        """Zero is an explicit limit, not a request for the default."""
        analyzer = ContractAnalyzer(max_sentences=0, min_sentence_length=0)

        assert analyzer.max_sentences == 0
        assert analyzer.min_sentence_length == 0
        assert [c.title for c in analyzer.analyze("Your salary is fixed.").clauses] == ["General Contract Content"]


class TestAnalyzeDocument:
    """Tests for document reports."""

    TEXT = (
        "EMPLOYMENT AGREEMENT\n"
        "This full-time, permanent position makes you a regular employee.\n"
        "COMPENSATION\n"
        "Your salary is 50,000 per year.\n"
        "The probationary period of 90 days applies."
    )

    def test_report(self, analyzer, now):
        report = analyzer.analyze_document(self.TEXT, file_name="offer.txt", file_type="txt", now=now)
        data = report.to_dict()

        assert report.word_count > 10
        assert report.contract_type.type.value == "full-time"
        assert [d.type for d in report.dates] == [DateType.PROBATION_END]
        assert report.dates[0].date == now + timedelta(days=90)
        assert data["fileName"] == "offer.txt"
        assert data["riskScore"] == report.analysis.risk_score.to_dict()
        assert {"group": "employment-terms", "titles": ["Compensation Clause", "Probation Period Clause"]} in data["clauseGroups"]

    def test_compensation_clause_has_section(self, analyzer, now):
        report = analyzer.analyze_document(self.TEXT, file_name="offer.txt", file_type="txt", now=now)
        compensation = next(c for c in report.analysis.clauses if c.category == ClauseCategory.COMPENSATION)
        assert compensation.section == "COMPENSATION"

    def test_classifier_replaces_clauses(self, now):
        classifier = StubClassifier()
        analyzer = ContractAnalyzer(classifier=classifier)
        rule = CustomClauseRule(name="Pay Rule", keywords=["salary"])

        report = analyzer.analyze_document(self.TEXT, file_name="offer.txt", file_type="txt", custom_rules=[rule], now=now)

        assert classifier.calls == 1
        assert [c.title for c in report.analysis.clauses] == ["Confidentiality Clause", "Pay Rule"]

    def test_classifier_failure_falls_back(self, now):
        analyzer = ContractAnalyzer(classifier=StubClassifier(error=ClassifierUnavailableError("down")))
        report = analyzer.analyze_document(self.TEXT, file_name="offer.txt", file_type="txt", now=now)

        assert ClauseCategory.COMPENSATION in [c.category for c in report.analysis.clauses]


def test_module_level_functions(now):
    """Plain functions use the default rule tables."""
    assert contract_clarity.analyze("Your salary is fixed.").clauses[0].title == "Compensation Clause"
    assert contract_clarity.extract_dates("Notice period of 30 days is required", now=now)[0].days_until == 30
