# DEPENDENCIES
from enum import Enum
from typing import Tuple
from types import MappingProxyType
from dataclasses import dataclass
from contract_clarity.config.clause_rules import ClauseCategory


class ContractType(str, Enum):
    FULL_TIME   = "full-time"
    PART_TIME   = "part-time"
    INTERNSHIP  = "internship"
    CONSULTANCY = "consultancy"
    FREELANCE   = "freelance"
    UNKNOWN     = "unknown"


class ClauseDifference(str, Enum):
    BOTH        = "both"
    ONLY_FIRST  = "only-first"
    ONLY_SECOND = "only-second"


@dataclass(frozen = True)
class ClauseGroup:
    """
    Display grouping of clause categories
    """
    id          : str
    title       : str
    description : str
    categories  : Tuple[ClauseCategory, ...]
    icon        : str


class ContractProfiles:
    """
    Contract-type indicators, clause groups and per-category explanations
    """
    # Ties resolve to the earliest type in this order
    TYPE_INDICATORS    = MappingProxyType({ContractType.FULL_TIME   : ("full-time", "full time", "permanent position", "permanent employment", "regular employee", "salaried position"),
                                           ContractType.PART_TIME   : ("part-time", "part time", "hours per week", "reduced hours"),
                                           ContractType.INTERNSHIP  : ("intern", "internship", "trainee", "training program", "student position", "apprentice"),
                                           ContractType.CONSULTANCY : ("consultant", "consultancy", "advisory services", "consulting agreement", "independent contractor", "contractor agreement"),
                                           ContractType.FREELANCE   : ("freelance", "freelancer", "self-employed", "project-based", "gig", "per project"),
                                          })

    TYPE_LABELS        = MappingProxyType({ContractType.FULL_TIME   : "Full-Time Employment",
                                           ContractType.PART_TIME   : "Part-Time Employment",
                                           ContractType.INTERNSHIP  : "Internship Agreement",
                                           ContractType.CONSULTANCY : "Consultancy Contract",
                                           ContractType.FREELANCE   : "Freelance Agreement",
                                           ContractType.UNKNOWN     : "Employment Contract",
                                          })

    TYPE_DESCRIPTIONS  = MappingProxyType({ContractType.FULL_TIME   : "A standard employment agreement for permanent, full-time positions with regular hours and full benefits.",
                                           ContractType.PART_TIME   : "An employment agreement for positions with reduced hours, typically with prorated benefits.",
                                           ContractType.INTERNSHIP  : "A training-focused agreement, often temporary, designed for students or early-career professionals.",
                                           ContractType.CONSULTANCY : "An independent contractor agreement for professional services, typically project-based.",
                                           ContractType.FREELANCE   : "A flexible work arrangement for independent service providers on a per-project basis.",
                                           ContractType.UNKNOWN     : "Unable to determine the specific contract type. Review the terms carefully.",
                                          })

    CLAUSE_GROUPS      = (ClauseGroup(id          = "employment-terms",
                                      title       = "Employment Terms",
                                      description = "Core terms defining the employment relationship",
                                      categories  = (ClauseCategory.COMPENSATION, ClauseCategory.BENEFITS, ClauseCategory.OVERTIME, ClauseCategory.PROBATION),
                                      icon        = "Briefcase",
                                     ),
                          ClauseGroup(id          = "employee-obligations",
                                      title       = "Employee Obligations",
                                      description = "Requirements and restrictions placed on the employee",
                                      categories  = (ClauseCategory.CONFIDENTIALITY, ClauseCategory.NON_COMPETE, ClauseCategory.NON_SOLICITATION, ClauseCategory.INTELLECTUAL_PROPERTY),
                                      icon        = "UserCheck",
                                     ),
                          ClauseGroup(id          = "employer-rights",
                                      title       = "Employer Rights",
                                      description = "Powers and authorities retained by the employer",
                                      categories  = (ClauseCategory.TERMINATION, ClauseCategory.RELOCATION),
                                      icon        = "Building",
                                     ),
                          ClauseGroup(id          = "legal-compliance",
                                      title       = "Legal & Compliance",
                                      description = "Legal framework and dispute handling",
                                      categories  = (ClauseCategory.DISPUTE_RESOLUTION, ClauseCategory.OTHER),
                                      icon        = "Scale",
                                     ),
                         )

    # "Why this clause matters" copy: (matters, impact)
    CLAUSE_IMPORTANCE  = MappingProxyType({ClauseCategory.COMPENSATION          : ("Defines your total earning potential including base pay, bonuses, and incentives.",
                                                                                   "Directly affects your financial security and should align with market rates for your role."),
                                           ClauseCategory.TERMINATION           : ("Outlines how and when your employment can end, including notice requirements.",
                                                                                   "Affects your job security and transition planning if employment ends unexpectedly."),
                                           ClauseCategory.CONFIDENTIALITY       : ("Protects company information but also limits what you can share after leaving.",
                                                                                   "May affect your ability to discuss work experience or use knowledge at future jobs."),
                                           ClauseCategory.NON_COMPETE           : ("Restricts your ability to work for competitors or start a competing business.",
                                                                                   "Can significantly limit career options after leaving, especially in specialized fields."),
                                           ClauseCategory.BENEFITS              : ("Covers health insurance, retirement plans, paid time off, and other perks.",
                                                                                   "Represents a significant portion of total compensation beyond just salary."),
                                           ClauseCategory.NON_SOLICITATION      : ("Prevents you from recruiting former colleagues or approaching clients.",
                                                                                   "Limits professional networking and business development after departure."),
                                           ClauseCategory.RELOCATION            : ("May require you to move to different locations at employer request.",
                                                                                   "Affects lifestyle, family considerations, and geographic flexibility."),
                                           ClauseCategory.DISPUTE_RESOLUTION    : ("Determines how legal disagreements will be handled.",
                                                                                   "Arbitration clauses may limit your legal options compared to court proceedings."),
                                           ClauseCategory.INTELLECTUAL_PROPERTY : ("Defines ownership of work you create during employment.",
                                                                                   "May affect side projects or inventions created outside work hours."),
                                           ClauseCategory.PROBATION             : ("Sets an evaluation period with potentially different terms.",
                                                                                   "May have reduced benefits or easier termination during this initial period."),
                                           ClauseCategory.OVERTIME              : ("Defines compensation for hours worked beyond standard schedule.",
                                                                                   "Exempt status can significantly reduce earnings for additional work hours."),
                                           ClauseCategory.OTHER                 : ("Contains additional terms specific to this agreement.",
                                                                                   "Review carefully as these may contain unique conditions."),
                                          })
