# DEPENDENCIES
from typing import List
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.config.clause_rules import ClauseRules
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.config.clause_rules import FindingTemplate
from contract_clarity.services.data_models import RiskFinding
from contract_clarity.services.clause_matcher import ClauseMatcher


def finding_from(template: FindingTemplate) -> RiskFinding:
    return RiskFinding(severity       = template.severity,
                       title          = template.title,
                       description    = template.description,
                       recommendation = template.recommendation,
                      )


class RiskRuleEvaluator:
    """
    Substring rules over the lower-cased full text

    Category-gated rules depend on the category's text-level keyword test,
    not on whether a ClauseMatch was emitted for it
    """
    def __init__(self, matcher: ClauseMatcher, rules: type = ClauseRules):
        self.matcher = matcher
        self.rules   = rules


    def evaluate(self, lower_text: str) -> List[RiskFinding]:
        """
        Apply every rule to the text

        Arguments:
        ----------
            lower_text { str } : Lower-cased full document text

        Returns:
        --------
                { list }       : Findings in rule order; several may share a category
        """
        rules    = self.rules
        has      = lambda phrases: TextProcessor.contains_any(lower_text, phrases)
        hits     = lambda category: self.matcher.category_hits(lower_text, category)
        findings = list()

        if has(rules.AT_WILL_PHRASES):
            findings.append(finding_from(rules.AT_WILL))

        if hits(ClauseCategory.NON_COMPETE):
            findings.append(finding_from(rules.NON_COMPETE))

        if has(rules.OVERTIME_EXEMPT_PHRASES):
            findings.append(finding_from(rules.OVERTIME_EXEMPTION))

        if hits(ClauseCategory.PROBATION):
            if has(rules.PROBATION_BENEFIT_PHRASES):
                findings.append(finding_from(rules.PROBATION_BENEFITS))

            if has(rules.PROBATION_TERMINATION_PHRASES):
                findings.append(finding_from(rules.PROBATION_TERMINATION))

        if hits(ClauseCategory.INTELLECTUAL_PROPERTY):
            if has(rules.BROAD_IP_PHRASES):
                findings.append(finding_from(rules.BROAD_IP_ASSIGNMENT))

            if has(rules.PRIOR_INVENTION_PHRASES):
                findings.append(finding_from(rules.PRIOR_INVENTIONS))

        if hits(ClauseCategory.NON_SOLICITATION):
            if has(rules.INDEFINITE_PHRASES):
                findings.append(finding_from(rules.INDEFINITE_NON_SOLICITATION))

            else:
                findings.append(finding_from(rules.NON_SOLICITATION))

        if hits(ClauseCategory.RELOCATION):
            if has(rules.MANDATORY_RELOCATION_PHRASES):
                findings.append(finding_from(rules.MANDATORY_RELOCATION))

            if has(rules.RELOCATION_ASSISTANCE_PHRASES) and has(rules.REPAYMENT_PHRASES):
                findings.append(finding_from(rules.RELOCATION_CLAWBACK))

        if (rules.ARBITRATION_PHRASE in lower_text) and (rules.OPTIONAL_ARBITRATION_PHRASE not in lower_text):
            findings.append(finding_from(rules.MANDATORY_ARBITRATION))

        if has(rules.WAIVER_PHRASES):
            findings.append(finding_from(rules.RIGHTS_WAIVER))

        return findings
