# DEPENDENCIES
from typing import Sequence
from contract_clarity.config.clause_rules import Severity
from contract_clarity.config.clause_rules import RiskLevel
from contract_clarity.config.clause_rules import ClauseRules
from contract_clarity.services.data_models import RiskScore
from contract_clarity.services.data_models import RiskFinding


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if (count == 1) else 's'}"


def calculate_risk_score(findings: Sequence[RiskFinding]) -> RiskScore:
    """
    Aggregate findings into a 0-100 score, a level and a summary

    Arguments:
    ----------
        findings { list } : All findings of one analysis, custom ones included

    Returns:
    --------
        { RiskScore }     : score = min(100, 25 x high + 15 x medium + 5 x low)
    """
    high_count   = sum(1 for finding in findings if (finding.severity == Severity.HIGH))
    medium_count = sum(1 for finding in findings if (finding.severity == Severity.MEDIUM))
    low_count    = len(findings) - high_count - medium_count
    weights      = ClauseRules.SEVERITY_WEIGHTS
    total_points = (high_count * weights[Severity.HIGH]) + (medium_count * weights[Severity.MEDIUM]) + (low_count * weights[Severity.LOW])
    score        = min(100, total_points)

    # First matching branch wins: high counts escalate low-scoring documents
    if (score >= 70) or (high_count >= 3):
        level = RiskLevel.CRITICAL

    elif (score >= 45) or (high_count >= 2):
        level = RiskLevel.HIGH

    elif (score >= 20) or (high_count >= 1) or (medium_count >= 2):
        level = RiskLevel.MODERATE

    else:
        level = RiskLevel.LOW

    return RiskScore(score   = score,
                     level   = level,
                     summary = _summarize(level, high_count, len(findings)),
                    )


def _summarize(level: RiskLevel, high_count: int, total: int) -> str:
    if (level == RiskLevel.CRITICAL):
        return f"This contract contains {_plural(high_count, 'high-severity concern')} that require careful review before signing. Consider consulting with a legal professional."

    if (level == RiskLevel.HIGH):
        return f"This contract has significant risk areas that warrant attention. Review the {_plural(total, 'identified concern')} carefully."

    if (level == RiskLevel.MODERATE):
        return f"This contract has some areas worth reviewing. The {_plural(total, 'identified item')} are common but should be understood."

    if (total == 0):
        return "No significant risk areas were detected. This appears to be a standard contract with typical terms."

    return f"This contract appears relatively straightforward with {_plural(total, 'minor consideration')}."
