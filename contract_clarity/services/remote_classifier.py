# DEPENDENCIES
import time
import requests
from typing import Any
from typing import Dict
from typing import List
from typing import Callable
from typing import Optional
from typing import Sequence
from contract_clarity.utils.logger import log_info
from contract_clarity.utils.logger import log_error
from contract_clarity.config.settings import settings
from contract_clarity.config.clause_rules import ClauseRules
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.config.clause_rules import ConfidenceTier
from contract_clarity.services.data_models import ClauseMatch
from contract_clarity.exceptions import ClassifierUnavailableError
from contract_clarity.services.data_models import ClassificationResult


def map_category(category: str) -> ClauseCategory:
    """
    Map a classifier label onto a clause category, unknown labels to `other`
    """
    normalized = (category or "").strip().lower()
    known      = {member.value: member for member in ClauseCategory}

    return known.get(normalized, ClauseCategory.OTHER)


def confidence_level(score: float) -> ConfidenceTier:
    if (score >= 0.7):
        return ConfidenceTier.STRONG

    if (score >= 0.4):
        return ConfidenceTier.MODERATE

    return ConfidenceTier.WEAK


class RemoteClauseClassifier:
    """
    Client for an optional remote sentence classifier (e.g. a LEGAL-BERT endpoint)

    Request:  POST {"action": "classify", "sentences": [...]}
    Response: {"results": [{"sentence", "category", "confidence", "scores"}]}
    """
    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None, timeout: Optional[int] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url or settings.CLASSIFIER_URL
        self.api_key  = api_key or settings.CLASSIFIER_API_KEY
        self.timeout  = timeout or settings.CLASSIFIER_TIMEOUT
        self.session  = session or requests.Session()


    def classify(self, sentences: Sequence[str]) -> List[ClassificationResult]:
        """
        Classify sentences in one request

        Raises:
        -------
            ClassifierUnavailableError : No endpoint configured, HTTP failure or malformed payload
        """
        if not sentences:
            return []

        if not self.base_url:
            raise ClassifierUnavailableError("No classifier endpoint configured")

        start_time = time.time()

        try:
            response = self.session.post(self.base_url,
                                         json    = {"action": "classify", "sentences": list(sentences)},
                                         headers = self._headers(),
                                         timeout = self.timeout,
                                        )
            response.raise_for_status()
            payload  = response.json()

        except (requests.RequestException, ValueError) as e:
            log_error(e, context = {"component": "RemoteClauseClassifier", "operation": "classify"})
            raise ClassifierUnavailableError(f"Classifier request failed: {e}") from e

        results = payload.get("results") if isinstance(payload, dict) else None

        if not isinstance(results, list):
            raise ClassifierUnavailableError("Classifier response has no results list")

        log_info("Sentences classified",
                 sentences       = len(sentences),
                 latency_seconds = round(time.time() - start_time, 3),
                )

        return [self._to_result(item) for item in results]


    def batch_classify(self, sentences: Sequence[str], batch_size: Optional[int] = None, on_progress: Optional[Callable[[int, int], None]] = None) -> List[ClassificationResult]:
        """
        Classify sentences in consecutive batches, reporting (processed, total)
        """
        batch_size = settings.CLASSIFIER_BATCH_SIZE if batch_size is None else batch_size

        if (batch_size < 1):
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        results    = list()
        total      = len(sentences)

        for start in range(0, total, batch_size):
            results.extend(self.classify(sentences[start:start + batch_size]))

            if on_progress:
                on_progress(min(start + batch_size, total), total)

        return results


    def is_available(self) -> bool:
        try:
            self.classify(["test"])

        except ClassifierUnavailableError:
            return False

        return True


    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}

        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        return headers


    @staticmethod
    def _to_result(item: Dict[str, Any]) -> ClassificationResult:
        try:
            return ClassificationResult(sentence   = str(item["sentence"]),
                                        category   = map_category(item.get("category", "")),
                                        confidence = float(item.get("confidence", 0.0)),
                                        scores     = {str(key): float(value) for key, value in (item.get("scores") or {}).items()},
                                       )

        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ClassifierUnavailableError(f"Malformed classification result: {item!r}") from e


def clauses_from_classifications(results: Sequence[ClassificationResult], max_sentences: int = 3) -> List[ClauseMatch]:
    """
    Build clause matches from classifier output, substituting the
    rule-based category assignment

    Sentences are grouped per category in first-seen order; a clause's
    confidence comes from the best classifier score among its sentences
    """
    grouped : Dict[ClauseCategory, List[ClassificationResult]] = dict()

    for result in results:
        grouped.setdefault(result.category, list()).append(result)

    clauses = list()

    for category, members in grouped.items():
        sentences = list(dict.fromkeys(member.sentence for member in members))[:max_sentences]
        title     = next((rule.title for rule in ClauseRules.CATEGORIES if (rule.category == category)), "Other Contract Terms")
        keywords  = next((list(rule.keywords) for rule in ClauseRules.CATEGORIES if (rule.category == category)), [])

        clauses.append(ClauseMatch(title      = title,
                                   category   = category,
                                   sentences  = sentences,
                                   keywords   = keywords,
                                   confidence = confidence_level(max(member.confidence for member in members)),
                                  ))

    return clauses
