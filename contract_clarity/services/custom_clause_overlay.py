# DEPENDENCIES
from typing import List
from typing import Tuple
from typing import Sequence
from contract_clarity.utils.logger import log_debug
from contract_clarity.config.clause_rules import Severity
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.config.clause_rules import ClauseRules
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.services.data_models import ClauseMatch
from contract_clarity.services.data_models import RiskFinding
from contract_clarity.services.clause_matcher import confidence_for
from contract_clarity.services.data_models import CustomClauseRule


def apply_custom_rules(sentences: Sequence[str], rules: Sequence[CustomClauseRule], max_sentences: int = 3) -> Tuple[List[ClauseMatch], List[RiskFinding]]:
    """
    Match user-defined keyword rules against pre-segmented sentences

    There is no text-level pre-check: a rule fires only through matching
    sentences. Every custom clause is tagged `other`, and high-risk rules
    also contribute a high-severity finding

    Arguments:
    ----------
        sentences     { list } : Sentences from TextProcessor.segment_sentences

        rules         { list } : Rules supplied by the custom clause store

        max_sentences { int }  : Upper bound on sentences collected per rule

    Returns:
    --------
           { tuple }           : (clauses, findings) to append to the built-in results
    """
    clauses  = list()
    findings = list()

    for rule in rules:
        matched = TextProcessor.find_matching_sentences(sentences     = sentences,
                                                        keywords      = rule.keywords,
                                                        max_sentences = max_sentences,
                                                       )

        if not matched:
            continue

        clauses.append(ClauseMatch(title      = rule.name,
                                   category   = ClauseCategory.OTHER,
                                   sentences  = matched,
                                   keywords   = list(rule.keywords),
                                   confidence = confidence_for(len(matched)),
                                  ))

        if (rule.risk_level == Severity.HIGH):
            findings.append(RiskFinding(severity       = Severity.HIGH,
                                        title          = f"{rule.name}{ClauseRules.CUSTOM_CLAUSE_TITLE_SUFFIX}",
                                        description    = rule.description or ClauseRules.CUSTOM_CLAUSE_DESCRIPTION,
                                        recommendation = ClauseRules.CUSTOM_CLAUSE_RECOMMENDATION,
                                       ))

    log_debug("Custom clause rules applied", rules = len(rules), matched = len(clauses))

    return clauses, findings
