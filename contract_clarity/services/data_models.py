# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from typing import Optional
from datetime import datetime
from dataclasses import field
from dataclasses import dataclass
from contract_clarity.config.clause_rules import Severity
from contract_clarity.config.date_patterns import DateType
from contract_clarity.config.clause_rules import RiskLevel
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.config.clause_rules import ConfidenceTier
from contract_clarity.config.contract_profiles import ContractType
from contract_clarity.config.contract_profiles import ClauseDifference


@dataclass
class ClauseMatch:
    """
    One detected clause category with its supporting sentences
    """
    title      : str
    category   : ClauseCategory
    sentences  : List[str]
    keywords   : List[str]       # used downstream for highlighting
    confidence : ConfidenceTier
    section    : Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        data = {"title"      : self.title,
                "category"   : self.category.value,
                "sentences"  : list(self.sentences),
                "keywords"   : list(self.keywords),
                "confidence" : self.confidence.value,
               }

        if self.section is not None:
            data["section"] = self.section

        return data


@dataclass
class RiskFinding:
    """
    One flagged concern
    """
    severity       : Severity
    title          : str
    description    : str
    recommendation : str

    def to_dict(self) -> Dict[str, Any]:
        return {"severity"       : self.severity.value,
                "title"          : self.title,
                "description"    : self.description,
                "recommendation" : self.recommendation,
               }


@dataclass
class RiskScore:
    """
    Aggregate risk: 0-100 score, severity band and summary sentence
    """
    score   : int
    level   : RiskLevel
    summary : str

    def to_dict(self) -> Dict[str, Any]:
        return {"score"   : self.score,
                "level"   : self.level.value,
                "summary" : self.summary,
               }


@dataclass
class ContractDate:
    """
    Contract-relevant date found in document text
    """
    id            : str
    date          : datetime
    type          : DateType
    title         : str
    description   : str                 # source sentence, truncated
    context       : str                 # full source sentence
    days_until    : int
    has_reminder  : bool                = False
    reminder_date : Optional[datetime]  = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"id"           : self.id,
                "date"         : self.date.isoformat(),
                "type"         : self.type.value,
                "title"        : self.title,
                "description"  : self.description,
                "context"      : self.context,
                "daysUntil"    : self.days_until,
                "hasReminder"  : self.has_reminder,
                "reminderDate" : self.reminder_date.isoformat() if self.reminder_date else None,
               }


@dataclass
class CustomClauseRule:
    """
    User-defined keyword rule supplied by the custom clause store
    """
    name        : str
    keywords    : List[str]
    category    : str                = "custom"
    description : str                = ""
    risk_level  : Optional[Severity] = None
    id          : Optional[str]      = None
    created_at  : Optional[int]      = None   # epoch milliseconds

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomClauseRule":
        """
        Build a rule from its stored / wire form (camelCase or snake_case keys)
        """
        risk_level = data.get("riskLevel", data.get("risk_level"))
        valid      = {severity.value for severity in Severity}

        return cls(name        = data["name"],
                   keywords    = [str(keyword) for keyword in data.get("keywords", [])],
                   category    = data.get("category") or "custom",
                   description = data.get("description") or "",
                   risk_level  = Severity(risk_level) if (risk_level in valid) else None,
                   id          = data.get("id"),
                   created_at  = data.get("createdAt", data.get("created_at")),
                  )


    def to_dict(self) -> Dict[str, Any]:
        return {"id"          : self.id,
                "name"        : self.name,
                "keywords"    : list(self.keywords),
                "category"    : self.category,
                "description" : self.description,
                "riskLevel"   : self.risk_level.value if self.risk_level else None,
                "createdAt"   : self.created_at,
               }


@dataclass
class AnalysisResult:
    """
    Structured result of one analysis pass
    """
    clauses    : List[ClauseMatch]
    risk_areas : List[RiskFinding]
    risk_score : RiskScore

    def to_dict(self) -> Dict[str, Any]:
        return {"clauses"   : [clause.to_dict() for clause in self.clauses],
                "riskAreas" : [risk.to_dict() for risk in self.risk_areas],
                "riskScore" : self.risk_score.to_dict(),
               }


@dataclass
class ContractTypeResult:
    """
    Rule-based contract type detection result
    """
    type       : ContractType
    confidence : str                    # "high", "medium", "low"
    indicators : List[str] = field(default_factory = list)
    label      : str       = ""
    summary    : str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type"        : self.type.value,
                "confidence"  : self.confidence,
                "indicators"  : list(self.indicators),
                "label"       : self.label,
                "description" : self.summary,
               }


@dataclass
class ClassificationResult:
    """
    Per-sentence category assignment returned by the remote classifier
    """
    sentence   : str
    category   : ClauseCategory
    confidence : float
    scores     : Dict[str, float] = field(default_factory = dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"sentence"   : self.sentence,
                "category"   : self.category.value,
                "confidence" : round(self.confidence, 3),
                "scores"     : self.scores,
               }


@dataclass
class DocumentReport:
    """
    Analysis of one extracted document, as returned to the caller
    """
    file_name     : str
    file_type     : str
    word_count    : int
    analysis      : AnalysisResult
    contract_type : ContractTypeResult
    dates         : List[ContractDate]
    page_count    : Optional[int]                      = None
    clause_groups : List[Tuple[str, List[str]]]        = field(default_factory = list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"fileName"     : self.file_name,
                "fileType"     : self.file_type,
                "pageCount"    : self.page_count,
                "wordCount"    : self.word_count,
                **self.analysis.to_dict(),
                "contractType" : self.contract_type.to_dict(),
                "dates"        : [date.to_dict() for date in self.dates],
                "clauseGroups" : [{"group": group_id, "titles": titles} for group_id, titles in self.clause_groups],
               }


@dataclass
class ClauseComparison:
    """
    Presence of one clause category across two analyzed contracts
    """
    category   : ClauseCategory
    difference : ClauseDifference
    first      : Optional[ClauseMatch] = None
    second     : Optional[ClauseMatch] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"category"   : self.category.value,
                "difference" : self.difference.value,
                "first"      : self.first.to_dict() if self.first else None,
                "second"     : self.second.to_dict() if self.second else None,
               }


@dataclass
class ContractComparison:
    """
    Category-by-category comparison of two analyses
    """
    clauses      : List[ClauseComparison]
    first_score  : RiskScore
    second_score : RiskScore

    @property
    def score_difference(self) -> int:
        return self.second_score.score - self.first_score.score


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"clauses"         : [clause.to_dict() for clause in self.clauses],
                "firstScore"      : self.first_score.to_dict(),
                "secondScore"     : self.second_score.to_dict(),
                "scoreDifference" : self.score_difference,
               }
