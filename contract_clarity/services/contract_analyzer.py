# DEPENDENCIES
from typing import List
from typing import Optional
from typing import Sequence
from datetime import datetime
from contract_clarity.utils.logger import log_info
from contract_clarity.utils.logger import log_error
from contract_clarity.config.settings import settings
from contract_clarity.utils.logger import ContractClarityLogger
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.services.data_models import ClauseMatch
from contract_clarity.services.data_models import AnalysisResult
from contract_clarity.services.data_models import DocumentReport
from contract_clarity.services.clause_matcher import ClauseMatcher
from contract_clarity.services.date_extractor import DateExtractor
from contract_clarity.services.data_models import CustomClauseRule
from contract_clarity.services.risk_scorer import calculate_risk_score
from contract_clarity.exceptions import ClassifierUnavailableError
from contract_clarity.services.risk_evaluator import RiskRuleEvaluator
from contract_clarity.services.contract_profiler import group_clauses
from contract_clarity.services.contract_profiler import detect_contract_type
from contract_clarity.services.custom_clause_overlay import apply_custom_rules
from contract_clarity.services.remote_classifier import RemoteClauseClassifier
from contract_clarity.services.remote_classifier import clauses_from_classifications


class ContractAnalyzer:
    """
    Orchestrates the text analysis engine

    Analysis Pipeline:
    1. Sentence segmentation
    2. Built-in clause matching (placeholder when nothing matches)
    3. Risk rule evaluation over the lower-cased text
    4. Custom clause overlay
    5. Risk scoring

    Date extraction runs independently of clause detection
    """
    def __init__(self, matcher: Optional[ClauseMatcher] = None, date_extractor: Optional[DateExtractor] = None, classifier: Optional[RemoteClauseClassifier] = None,
                 max_sentences: Optional[int] = None, min_sentence_length: Optional[int] = None):
        """
        Arguments:
        ----------
            matcher             { ClauseMatcher }          : Built-in category matcher

            date_extractor      { DateExtractor }          : Contract date extractor

            classifier          { RemoteClauseClassifier } : Optional remote classifier for document reports

            max_sentences       { int }                    : Sentences kept per clause

            min_sentence_length { int }                    : Shorter sentence candidates are dropped
        """
        self.max_sentences       = settings.MAX_MATCHED_SENTENCES if max_sentences is None else max_sentences
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length
        self.matcher             = matcher or ClauseMatcher(max_sentences = self.max_sentences)
        self.evaluator           = RiskRuleEvaluator(matcher = self.matcher)
        self.date_extractor      = date_extractor or DateExtractor()
        self.classifier          = classifier


    @ContractClarityLogger.log_execution_time("analyze_contract")
    def analyze(self, text: str, custom_rules: Sequence[CustomClauseRule] = ()) -> AnalysisResult:
        """
        Detect clauses, derive risk findings and score them

        Pure function of `text` and `custom_rules`: never raises for string
        input and always returns at least one clause

        Arguments:
        ----------
            text         { str }  : Extracted, normalized document text

            custom_rules { list } : Rules from the custom clause store

        Returns:
        --------
            { AnalysisResult }    : Clauses, risk areas and risk score
        """
        text       = text or ""
        lower_text = text.lower()
        sentences  = TextProcessor.segment_sentences(text, min_length = self.min_sentence_length)
        sections   = TextProcessor.detect_sections(text)

        clauses    = self.matcher.match(lower_text = lower_text,
                                        sentences  = sentences,
                                        sections   = sections,
                                        text       = text,
                                       )

        risk_areas = self.evaluator.evaluate(lower_text)

        custom_clauses, custom_findings = apply_custom_rules(sentences     = sentences,
                                                             rules         = custom_rules,
                                                             max_sentences = self.max_sentences,
                                                            )
        clauses.extend(custom_clauses)
        risk_areas.extend(custom_findings)

        risk_score = calculate_risk_score(risk_areas)

        log_info("Contract analysis complete",
                 sentences  = len(sentences),
                 clauses    = len(clauses),
                 risk_areas = len(risk_areas),
                 score      = risk_score.score,
                 risk_level = risk_score.level.value,
                )

        return AnalysisResult(clauses    = clauses,
                              risk_areas = risk_areas,
                              risk_score = risk_score,
                             )


    def extract_dates(self, text: str, now: Optional[datetime] = None):
        return self.date_extractor.extract(text, now = now)


    def analyze_document(self, raw_text: str, file_name: str, file_type: str, page_count: Optional[int] = None, custom_rules: Sequence[CustomClauseRule] = (),
                         now: Optional[datetime] = None) -> DocumentReport:
        """
        Full report for text handed over by the extraction collaborator

        When a remote classifier is configured its categories replace the
        rule-based clause list; risk rules and scoring stay rule-based. A
        classifier failure falls back to the rule-based clauses
        """
        text     = TextProcessor.normalize_text(raw_text or "")
        analysis = self.analyze(text, custom_rules = custom_rules)

        if self.classifier is not None:
            analysis.clauses = self._classified_clauses(text, custom_rules = custom_rules, fallback = analysis.clauses)

        return DocumentReport(file_name     = file_name,
                              file_type     = file_type,
                              page_count    = page_count,
                              word_count    = TextProcessor.count_words(text),
                              analysis      = analysis,
                              contract_type = detect_contract_type(text),
                              dates         = self.date_extractor.extract(raw_text or "", now = now),
                              clause_groups = [(group.id, [clause.title for clause in members]) for group, members in group_clauses(analysis.clauses)],
                             )


    def _classified_clauses(self, text: str, custom_rules: Sequence[CustomClauseRule], fallback: List[ClauseMatch]) -> List[ClauseMatch]:
        sentences = TextProcessor.segment_sentences(text, min_length = self.min_sentence_length)

        try:
            results = self.classifier.batch_classify(sentences)

        except ClassifierUnavailableError as e:
            log_error(e, context = {"component": "ContractAnalyzer", "operation": "remote_classification"})
            return fallback

        clauses   = clauses_from_classifications(results, max_sentences = self.max_sentences) or [self.matcher.placeholder()]

        # Custom clauses stay keyword-based
        custom, _ = apply_custom_rules(sentences     = sentences,
                                       rules         = custom_rules,
                                       max_sentences = self.max_sentences,
                                      )

        return clauses + custom


# Module-level analyzer for callers that want plain functions
_default_analyzer : Optional[ContractAnalyzer] = None


def _get_default_analyzer() -> ContractAnalyzer:
    global _default_analyzer

    if _default_analyzer is None:
        _default_analyzer = ContractAnalyzer()

    return _default_analyzer


def analyze(text: str, custom_rules: Sequence[CustomClauseRule] = ()) -> AnalysisResult:
    """
    Analyze contract text with the default rule tables
    """
    return _get_default_analyzer().analyze(text, custom_rules = custom_rules)


def extract_dates(text: str, now: Optional[datetime] = None):
    """
    Extract contract dates with the default pattern table
    """
    return _get_default_analyzer().extract_dates(text, now = now)
