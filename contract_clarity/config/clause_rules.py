# DEPENDENCIES
from enum import Enum
from typing import Tuple
from types import MappingProxyType
from dataclasses import dataclass


class ClauseCategory(str, Enum):
    COMPENSATION          = "compensation"
    TERMINATION           = "termination"
    CONFIDENTIALITY       = "confidentiality"
    NON_COMPETE           = "non-compete"
    BENEFITS              = "benefits"
    NON_SOLICITATION      = "non-solicitation"
    RELOCATION            = "relocation"
    DISPUTE_RESOLUTION    = "dispute-resolution"
    INTELLECTUAL_PROPERTY = "intellectual-property"
    PROBATION             = "probation"
    OVERTIME              = "overtime"
    OTHER                 = "other"


class Severity(str, Enum):
    LOW    = "low"
    MEDIUM = "medium"
    HIGH   = "high"


class RiskLevel(str, Enum):
    LOW      = "low"
    MODERATE = "moderate"
    HIGH     = "high"
    CRITICAL = "critical"


class ConfidenceTier(str, Enum):
    STRONG   = "strong"
    MODERATE = "moderate"
    WEAK     = "weak"


@dataclass(frozen = True)
class ClauseCategoryRule:
    """
    Fixed keyword list for one built-in clause category
    """
    category : ClauseCategory
    title    : str
    keywords : Tuple[str, ...]


@dataclass(frozen = True)
class FindingTemplate:
    """
    Verbatim text of a risk finding emitted by a rule
    """
    severity       : Severity
    title          : str
    description    : str
    recommendation : str


class ClauseRules:
    """
    Static clause-detection and risk-rule tables for employment contracts
    """
    # Built-in categories in detection order
    CATEGORIES                     = (ClauseCategoryRule(category = ClauseCategory.COMPENSATION,
                                                         title    = "Compensation Clause",
                                                         keywords = ("salary", "compensation", "wage", "pay", "remuneration", "bonus", "earnings"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.TERMINATION,
                                                         title    = "Termination Clause",
                                                         keywords = ("termination", "terminate", "notice period", "dismissal", "end of employment", "resignation"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.CONFIDENTIALITY,
                                                         title    = "Confidentiality Clause",
                                                         keywords = ("confidential", "non-disclosure", "nda", "proprietary", "trade secret", "disclose"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.NON_COMPETE,
                                                         title    = "Non-Compete Clause",
                                                         keywords = ("non-compete", "non compete", "compete with", "competitive business", "competing"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.BENEFITS,
                                                         title    = "Benefits Clause",
                                                         keywords = ("benefit", "insurance", "vacation", "401k", "pension", "health plan", "paid leave"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.OVERTIME,
                                                         title    = "Overtime Clause",
                                                         keywords = ("overtime", "extra hours", "time and a half", "work hours", "additional hours", "working hours"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.PROBATION,
                                                         title    = "Probation Period Clause",
                                                         keywords = ("probation", "probationary period", "trial period", "introductory period", "evaluation period"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.INTELLECTUAL_PROPERTY,
                                                         title    = "Intellectual Property Clause",
                                                         keywords = ("intellectual property", "invention", "work product", "copyright", "patent", "trade secret", "ip rights"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.NON_SOLICITATION,
                                                         title    = "Non-Solicitation Clause",
                                                         keywords = ("non-solicitation", "non solicitation", "solicit employees", "solicit clients", "solicit customers", "recruit employees", "poach"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.RELOCATION,
                                                         title    = "Relocation Clause",
                                                         keywords = ("relocation", "relocate", "transfer to another", "reassignment", "work location", "geographic mobility", "move to another"),
                                                        ),
                                      ClauseCategoryRule(category = ClauseCategory.DISPUTE_RESOLUTION,
                                                         title    = "Dispute Resolution Clause",
                                                         keywords = ("arbitration", "dispute resolution", "mediation", "litigation", "jurisdiction", "governing law", "legal proceedings"),
                                                        ),
                                     )

    # Emitted when no built-in category produces a clause
    PLACEHOLDER_TITLE              = "General Contract Content"
    PLACEHOLDER_SENTENCE           = "Document uploaded successfully. No specific clause patterns were detected. Please review the extracted text below for details."

    # Secondary phrase checks (lower-case substrings)
    AT_WILL_PHRASES                = ("immediate termination", "at will", "at-will")
    OVERTIME_EXEMPT_PHRASES        = ("exempt", "no overtime pay", "unpaid overtime", "salaried exempt")
    PROBATION_BENEFIT_PHRASES      = ("reduced benefits", "no benefits during", "limited benefits", "benefits begin after")
    PROBATION_TERMINATION_PHRASES  = ("terminate during probation", "dismissal during probation", "end employment during")
    BROAD_IP_PHRASES               = ("all inventions", "employer owns", "assign all rights", "work for hire", "company property")
    PRIOR_INVENTION_PHRASES        = ("prior invention", "existing invention", "invention disclosure")
    INDEFINITE_PHRASES             = ("permanent", "indefinite", "forever")
    MANDATORY_RELOCATION_PHRASES   = ("required to relocate", "must relocate", "mandatory relocation", "obligation to relocate")
    RELOCATION_ASSISTANCE_PHRASES  = ("relocation assistance", "relocation package", "moving expenses", "relocation reimbursement")
    REPAYMENT_PHRASES              = ("repay", "reimburse", "clawback", "pay back", "return the")
    WAIVER_PHRASES                 = ("waive", "forfeit", "relinquish", "give up rights")
    ARBITRATION_PHRASE             = "arbitration"
    OPTIONAL_ARBITRATION_PHRASE    = "optional arbitration"

    # Finding texts reproduced verbatim for downstream report generation
    AT_WILL                        = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "At-Will Employment",
                                                     description    = "This contract may allow termination without cause.",
                                                     recommendation = "Clarify termination conditions and notice requirements.",
                                                    )

    NON_COMPETE                    = FindingTemplate(severity       = Severity.HIGH,
                                                     title          = "Non-Compete Restrictions",
                                                     description    = "This contract contains clauses that may limit your future employment options.",
                                                     recommendation = "Review the scope, duration, and geographic limitations carefully.",
                                                    )

    OVERTIME_EXEMPTION             = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "Overtime Exemption",
                                                     description    = "This contract may classify you as overtime-exempt, limiting extra compensation for additional hours worked.",
                                                     recommendation = "Verify your exempt status meets legal requirements and understand expected working hours.",
                                                    )

    PROBATION_BENEFITS             = FindingTemplate(severity       = Severity.LOW,
                                                     title          = "Probation Period Benefits",
                                                     description    = "Benefits may be limited or unavailable during the probationary period.",
                                                     recommendation = "Understand what benefits apply during probation and when full benefits begin.",
                                                    )

    PROBATION_TERMINATION          = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "Probation Termination Terms",
                                                     description    = "The contract allows for easier termination during the probationary period.",
                                                     recommendation = "Review what protections, if any, apply during your probation period.",
                                                    )

    BROAD_IP_ASSIGNMENT            = FindingTemplate(severity       = Severity.HIGH,
                                                     title          = "Broad IP Assignment",
                                                     description    = "This contract may require assignment of all intellectual property rights, potentially including personal projects created outside work hours.",
                                                     recommendation = "Clarify scope of IP assignment and negotiate carve-outs for personal projects if needed.",
                                                    )

    PRIOR_INVENTIONS               = FindingTemplate(severity       = Severity.LOW,
                                                     title          = "Prior Inventions Disclosure",
                                                     description    = "You may need to disclose existing inventions to exclude them from the IP assignment.",
                                                     recommendation = "List all prior inventions you wish to retain rights to before signing.",
                                                    )

    INDEFINITE_NON_SOLICITATION    = FindingTemplate(severity       = Severity.HIGH,
                                                     title          = "Indefinite Non-Solicitation",
                                                     description    = "The non-solicitation restrictions may have no time limit, potentially affecting your future career indefinitely.",
                                                     recommendation = "Negotiate a reasonable time limit (typically 1-2 years) for non-solicitation obligations.",
                                                    )

    NON_SOLICITATION               = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "Non-Solicitation Restrictions",
                                                     description    = "This contract limits your ability to contact former colleagues, clients, or customers after leaving.",
                                                     recommendation = "Understand which relationships are covered and for how long these restrictions apply.",
                                                    )

    MANDATORY_RELOCATION           = FindingTemplate(severity       = Severity.HIGH,
                                                     title          = "Mandatory Relocation",
                                                     description    = "This contract may require you to relocate to a different location at the employer's request.",
                                                     recommendation = "Clarify relocation terms, notice periods, and what happens if you decline a relocation request.",
                                                    )

    RELOCATION_CLAWBACK            = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "Relocation Clawback",
                                                     description    = "Relocation assistance may need to be repaid if you leave the company within a certain timeframe.",
                                                     recommendation = "Understand the repayment terms, timeframes, and amounts you could owe if you leave early.",
                                                    )

    MANDATORY_ARBITRATION          = FindingTemplate(severity       = Severity.LOW,
                                                     title          = "Mandatory Arbitration",
                                                     description    = "Disputes may require resolution through arbitration rather than court.",
                                                     recommendation = "Consider the implications of mandatory arbitration clauses.",
                                                    )

    RIGHTS_WAIVER                  = FindingTemplate(severity       = Severity.MEDIUM,
                                                     title          = "Rights Waiver Language",
                                                     description    = "The contract contains language about waiving certain rights.",
                                                     recommendation = "Understand exactly what rights you may be giving up.",
                                                    )

    # Custom clause findings
    CUSTOM_CLAUSE_TITLE_SUFFIX     = " - Custom Clause"
    CUSTOM_CLAUSE_DESCRIPTION      = "Custom clause detected in contract."
    CUSTOM_CLAUSE_RECOMMENDATION   = "Review this custom clause carefully against your industry standards and requirements."

    # Severity weights used by the risk scorer
    SEVERITY_WEIGHTS               = MappingProxyType({Severity.HIGH   : 25,
                                                       Severity.MEDIUM : 15,
                                                       Severity.LOW    : 5,
                                                      })


    @classmethod
    def get_category_rule(cls, category: ClauseCategory) -> ClauseCategoryRule:
        """
        Look up the built-in rule for a category
        """
        for rule in cls.CATEGORIES:
            if (rule.category == category):
                return rule

        raise KeyError(f"No built-in keyword rule for category: {category}")
