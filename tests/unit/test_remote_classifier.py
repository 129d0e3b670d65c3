"""Unit tests for the remote clause classifier client.

The HTTP session is mocked; no network access is needed.
"""

from unittest.mock import MagicMock

import pytest
import requests

from contract_clarity.config.clause_rules import ClauseCategory, ConfidenceTier
from contract_clarity.exceptions import ClassifierUnavailableError
from contract_clarity.services.remote_classifier import (
    RemoteClauseClassifier,
    clauses_from_classifications,
    confidence_level,
    map_category,
)


def make_session(payload=None, error=None) -> MagicMock:
    session = MagicMock()
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value.json.return_value = payload
    return session


def echo_session() -> MagicMock:
    """Session that classifies every sentence as compensation."""
    session = MagicMock()

    def post(url, json, headers, timeout):
        response = MagicMock()
        response.json.return_value = {
            "results": [
                {"sentence": sentence, "category": "compensation", "confidence": 0.9, "scores": {}}
                for sentence in json["sentences"]
            ]
        }
        return response

    session.post.side_effect = post
    return session


class TestHelpers:
    """Tests for label and confidence mapping."""

    def test_map_category(self):
        assert map_category("Compensation") == ClauseCategory.COMPENSATION
        assert map_category("non-compete") == ClauseCategory.NON_COMPETE
        assert map_category("unheard-of") == ClauseCategory.OTHER
        assert map_category("") == ClauseCategory.OTHER

    def test_confidence_level(self):
        assert confidence_level(0.95) == ConfidenceTier.STRONG
        assert confidence_level(0.7) == ConfidenceTier.STRONG
        assert confidence_level(0.5) == ConfidenceTier.MODERATE
        assert confidence_level(0.1) == ConfidenceTier.WEAK


class TestClassify:
    """Tests for RemoteClauseClassifier.classify."""

    def test_successful_request(self):
        payload = {"results": [{"sentence": "Salary is fixed.", "category": "compensation", "confidence": 0.8, "scores": {"compensation": 0.8}}]}
        session = make_session(payload)
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", api_key="secret", session=session)

        results = classifier.classify(["Salary is fixed."])

        assert results[0].category == ClauseCategory.COMPENSATION
        assert results[0].confidence == 0.8
        _, kwargs = session.post.call_args
        assert kwargs["json"] == {"action": "classify", "sentences": ["Salary is fixed."]}
        assert kwargs["headers"]["Authorization"] == "Bearer secret"

    def test_empty_input_skips_request(self):
        session = make_session({"results": []})
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=session)
        assert classifier.classify([]) == []
        session.post.assert_not_called()

    def test_missing_endpoint(self):
        classifier = RemoteClauseClassifier(base_url="", session=make_session())
        classifier.base_url = None
        with pytest.raises(ClassifierUnavailableError):
            classifier.classify(["text"])

    def test_http_failure(self):
        session = make_session(error=requests.ConnectionError("down"))
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=session)
        with pytest.raises(ClassifierUnavailableError):
            classifier.classify(["text"])
        assert not classifier.is_available()

    def test_malformed_payload(self):
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=make_session({"oops": 1}))
        with pytest.raises(ClassifierUnavailableError):
            classifier.classify(["text"])

    def test_malformed_result_item(self):
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=make_session({"results": [{"category": "x"}]}))
        with pytest.raises(ClassifierUnavailableError):
            classifier.classify(["text"])

    def test_batches_and_progress(self):
        session = echo_session()
        classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=session)
        progress = []

        results = classifier.batch_classify(
            ["one sentence", "two sentence", "three sentence"],
            batch_size=2,
            on_progress=lambda done, total: progress.append((done, total)),
        )

        assert len(results) == 3
        assert session.post.call_count == 2
        assert progress == [(2, 3), (3, 3)]


def test_clauses_from_classifications():
    """Results are grouped per category in first-seen order."""
    session = MagicMock()
    session.post.return_value.json.return_value = {
        "results": [
            {"sentence": "Salary is fixed.", "category": "compensation", "confidence": 0.5},
            {"sentence": "Some other text.", "category": "misc", "confidence": 0.2},
            {"sentence": "Bonus is yearly.", "category": "compensation", "confidence": 0.9},
        ]
    }
    classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=session)
    clauses = clauses_from_classifications(classifier.classify(["a", "b", "c"]))

    assert [(c.title, c.category) for c in clauses] == [
        ("Compensation Clause", ClauseCategory.COMPENSATION),
        ("Other Contract Terms", ClauseCategory.OTHER),
    ]
    assert clauses[0].sentences == ["Salary is fixed.", "Bonus is yearly."]
    assert clauses[0].confidence == ConfidenceTier.STRONG
    assert clauses[1].keywords == []


def test_batch_size_must_be_positive():
    """An explicit zero batch size is rejected instead of replaced by the default."""
    session = echo_session()
    classifier = RemoteClauseClassifier(base_url="http://classifier.test", session=session)

    with pytest.raises(ValueError):
        classifier.batch_classify(["one sentence"], batch_size=0)
    session.post.assert_not_called()
