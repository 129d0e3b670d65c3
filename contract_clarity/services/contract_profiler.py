# DEPENDENCIES
from typing import List
from typing import Tuple
from typing import Sequence
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.services.data_models import ClauseMatch
from contract_clarity.config.contract_profiles import ClauseGroup
from contract_clarity.config.contract_profiles import ContractType
from contract_clarity.config.contract_profiles import ContractProfiles
from contract_clarity.services.data_models import AnalysisResult
from contract_clarity.services.data_models import ClauseComparison
from contract_clarity.services.data_models import ContractTypeResult
from contract_clarity.services.data_models import ContractComparison
from contract_clarity.config.contract_profiles import ClauseDifference


def detect_contract_type(text: str) -> ContractTypeResult:
    """
    Rule-based contract type from indicator keyword counts

    The type with most matching indicators wins (earlier types win ties);
    3+ indicators give high confidence, 2 medium, otherwise low
    """
    lower_text = text.lower()
    best_type  = ContractType.UNKNOWN
    best_found = list()

    for contract_type, indicators in ContractProfiles.TYPE_INDICATORS.items():
        found = [indicator for indicator in indicators if indicator in lower_text]

        if (len(found) > len(best_found)):
            best_type  = contract_type
            best_found = found

    if (len(best_found) >= 3):
        confidence = "high"

    elif (len(best_found) == 2):
        confidence = "medium"

    else:
        confidence = "low"

    return ContractTypeResult(type       = best_type,
                              confidence = confidence,
                              indicators = best_found,
                              label      = ContractProfiles.TYPE_LABELS[best_type],
                              summary    = ContractProfiles.TYPE_DESCRIPTIONS[best_type],
                             )


def group_clauses(clauses: Sequence[ClauseMatch], groups: Sequence[ClauseGroup] = ContractProfiles.CLAUSE_GROUPS) -> List[Tuple[ClauseGroup, List[ClauseMatch]]]:
    """
    Group clauses for display; groups without clauses are omitted
    """
    grouped = list()

    for group in groups:
        members = [clause for clause in clauses if clause.category in group.categories]

        if members:
            grouped.append((group, members))

    return grouped


def explain_category(category: ClauseCategory) -> Tuple[str, str]:
    """
    (why it matters, likely impact) for a clause category
    """
    return ContractProfiles.CLAUSE_IMPORTANCE[category]


def compare_analyses(first: AnalysisResult, second: AnalysisResult) -> ContractComparison:
    """
    Compare two analyses category by category

    Categories are the union of both clause lists, in order of first
    appearance (first contract, then second); each side contributes its
    first clause of that category

    Arguments:
    ----------
        first  { AnalysisResult } : Analysis of the first contract

        second { AnalysisResult } : Analysis of the second contract

    Returns:
    --------
        { ContractComparison }    : Per-category differences and both risk scores
    """
    categories  = list(dict.fromkeys([clause.category for clause in first.clauses] + [clause.category for clause in second.clauses]))
    comparisons = list()

    for category in categories:
        first_clause  = next((clause for clause in first.clauses if clause.category == category), None)
        second_clause = next((clause for clause in second.clauses if clause.category == category), None)

        if first_clause and second_clause:
            difference = ClauseDifference.BOTH

        elif first_clause:
            difference = ClauseDifference.ONLY_FIRST

        else:
            difference = ClauseDifference.ONLY_SECOND

        comparisons.append(ClauseComparison(category   = category,
                                            difference = difference,
                                            first      = first_clause,
                                            second     = second_clause,
                                           ))

    return ContractComparison(clauses      = comparisons,
                              first_score  = first.risk_score,
                              second_score = second.risk_score,
                             )
