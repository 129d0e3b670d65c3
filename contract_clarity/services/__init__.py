# DEPENDENCIES
from .data_models import RiskScore
from .data_models import RiskFinding
from .data_models import ClauseMatch
from .data_models import ContractDate
from .data_models import AnalysisResult
from .data_models import DocumentReport
from .data_models import CustomClauseRule
from .clause_matcher import ClauseMatcher
from .date_extractor import DateExtractor
from .risk_scorer import calculate_risk_score
from .risk_evaluator import RiskRuleEvaluator
from .contract_analyzer import ContractAnalyzer
from .calendar_export import export_icalendar
from .custom_clause_store import CustomClauseStore
from .custom_clause_overlay import apply_custom_rules
from .contract_profiler import compare_analyses
from .contract_profiler import detect_contract_type
from .remote_classifier import RemoteClauseClassifier



__all__ = ['RiskScore',
           'RiskFinding',
           'ClauseMatch',
           'ContractDate',
           'ClauseMatcher',
           'DateExtractor',
           'AnalysisResult',
           'DocumentReport',
           'CustomClauseRule',
           'ContractAnalyzer',
           'export_icalendar',
           'RiskRuleEvaluator',
           'CustomClauseStore',
           'apply_custom_rules',
           'compare_analyses',
           'calculate_risk_score',
           'detect_contract_type',
           'RemoteClauseClassifier',
          ]
