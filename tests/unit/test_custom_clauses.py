"""Unit tests for custom clause rules: the overlay and the JSON store.

Tests cover:
- Sentence-level matching of user rules, tagged `other`
- High-risk findings and description fallback
- Store CRUD, import/export and error handling
"""

import json

import pytest

from contract_clarity.config.clause_rules import ClauseCategory, ConfidenceTier, Severity
from contract_clarity.exceptions import CustomClauseStoreError
from contract_clarity.services.custom_clause_overlay import apply_custom_rules
from contract_clarity.services.custom_clause_store import CustomClauseStore
from contract_clarity.services.data_models import CustomClauseRule


SENTENCES = [
    "Employees must wear a uniform at all times.",
    "A stipend for equipment is provided.",
    "Uniform costs are covered by the company.",
]


class TestOverlay:
    """Tests for apply_custom_rules."""

    def test_matching_rule_produces_other_clause(self):
        """Custom clauses use the rule name and the `other` category."""
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"])
        clauses, findings = apply_custom_rules(SENTENCES, [rule])

        assert len(clauses) == 1
        assert clauses[0].title == "Dress Code"
        assert clauses[0].category == ClauseCategory.OTHER
        assert clauses[0].confidence == ConfidenceTier.MODERATE
        assert clauses[0].sentences == [SENTENCES[0], SENTENCES[2]]
        assert findings == []

    def test_rule_without_match_is_skipped(self):
        rule = CustomClauseRule(name="Travel", keywords=["travel"], risk_level=Severity.HIGH)
        assert apply_custom_rules(SENTENCES, [rule]) == ([], [])

    def test_high_risk_rule_adds_finding(self):
        """High-risk rules add a high finding with their description."""
        rule = CustomClauseRule(name="Dress Code", keywords=["uniform"], description="Uniforms are mandatory.", risk_level=Severity.HIGH)
        _, findings = apply_custom_rules(SENTENCES, [rule])

        assert len(findings) == 1
        assert findings[0].severity == Severity.HIGH
        assert findings[0].title == "Dress Code - Custom Clause"
        assert findings[0].description == "Uniforms are mandatory."

    def test_description_fallback(self):
        """An empty description falls back to the default wording."""
        rule = CustomClauseRule(name="Stipend", keywords=["stipend"], risk_level=Severity.HIGH)
        _, findings = apply_custom_rules(SENTENCES, [rule])
        assert findings[0].description == "Custom clause detected in contract."

    def test_medium_risk_rule_adds_no_finding(self):
        rule = CustomClauseRule(name="Stipend", keywords=["stipend"], risk_level=Severity.MEDIUM)
        clauses, findings = apply_custom_rules(SENTENCES, [rule])
        assert len(clauses) == 1
        assert findings == []

    def test_empty_keywords_match_nothing(self):
        rule = CustomClauseRule(name="Empty", keywords=[])
        assert apply_custom_rules(SENTENCES, [rule]) == ([], [])


class TestRuleSerialization:
    """Tests for CustomClauseRule wire format."""

    def test_from_dict_accepts_camel_case(self):
        rule = CustomClauseRule.from_dict({"name": "A", "keywords": ["x"], "riskLevel": "high", "createdAt": 5, "id": "r1"})
        assert rule.risk_level == Severity.HIGH
        assert rule.created_at == 5
        assert rule.id == "r1"
        assert rule.category == "custom"

    def test_unknown_risk_level_is_dropped(self):
        rule = CustomClauseRule.from_dict({"name": "A", "keywords": ["x"], "riskLevel": "extreme"})
        assert rule.risk_level is None

    def test_to_dict(self):
        data = CustomClauseRule(name="A", keywords=["x"], risk_level=Severity.LOW).to_dict()
        assert data["riskLevel"] == "low"
        assert data["keywords"] == ["x"]


@pytest.fixture
def store(tmp_path) -> CustomClauseStore:
    """Store backed by a temporary file."""
    return CustomClauseStore(path=tmp_path / "clauses" / "custom.json")


class TestCustomClauseStore:
    """Tests for the JSON-file clause store."""

    def test_missing_file_is_empty(self, store):
        assert store.list() == []

    def test_add_and_list(self, store):
        rule = store.add("Dress Code", ["uniform"], description="Uniforms required")

        assert rule.id
        assert rule.created_at > 0
        assert rule.risk_level == Severity.MEDIUM
        assert [r.name for r in store.list()] == ["Dress Code"]
        assert store.path.exists()

    def test_update(self, store):
        rule = store.add("Dress Code", ["uniform"])
        updated = store.update(rule.id, keywords=["uniform", "attire"], risk_level=Severity.HIGH)

        assert updated.keywords == ["uniform", "attire"]
        assert store.list()[0].risk_level == Severity.HIGH

    def test_update_unknown_id(self, store):
        assert store.update("missing", name="x") is None

    def test_update_rejects_unknown_fields(self, store):
        rule = store.add("Dress Code", ["uniform"])
        with pytest.raises(ValueError):
            store.update(rule.id, id="other")

    def test_delete(self, store):
        first = store.add("A", ["a"])
        store.add("B", ["b"])

        assert store.delete(first.id)
        assert not store.delete(first.id)
        assert [r.name for r in store.list()] == ["B"]

    def test_clear(self, store):
        store.add("A", ["a"])
        store.clear()
        assert store.list() == []

    def test_export_then_import_into_another_store(self, store, tmp_path):
        store.add("A", ["a"], risk_level=Severity.HIGH)
        exported = store.export_json()

        other = CustomClauseStore(path=tmp_path / "other.json")
        assert other.import_json(exported) == 1
        imported = other.list()[0]
        assert imported.name == "A"
        assert imported.risk_level == Severity.HIGH
        assert imported.id != store.list()[0].id

    def test_import_skips_invalid_items_and_applies_defaults(self, store):
        payload = json.dumps([
            {"name": "Valid", "keywords": ["x"]},
            {"name": "No keywords"},
            {"keywords": ["y"]},
            {"name": "Bad keywords", "keywords": "z"},
            "not an object",
        ])

        assert store.import_json(payload) == 1
        rule = store.list()[0]
        assert rule.category == "custom"
        assert rule.description == ""
        assert rule.risk_level == Severity.MEDIUM

    def test_import_rejects_malformed_json(self, store):
        with pytest.raises(CustomClauseStoreError):
            store.import_json("{not json")

    def test_import_rejects_non_array(self, store):
        with pytest.raises(CustomClauseStoreError):
            store.import_json(json.dumps({"name": "A"}))

    def test_corrupted_file(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text("{broken", encoding="utf-8")
        with pytest.raises(CustomClauseStoreError):
            store.list()

    @pytest.mark.parametrize(
        "payload",
        [
            [{"keywords": ["uniform"]}],
            ["just a string"],
            [{"name": "A", "keywords": 5}],
        ],
    )
    def test_malformed_rule_in_file(self, store, payload):
        """Hand-edited files with broken rules raise the store error."""
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(CustomClauseStoreError, match="malformed"):
            store.list()
