# DEPENDENCIES
from .settings import settings
from .date_patterns import DateType
from .clause_rules import Severity
from .clause_rules import RiskLevel
from .clause_rules import ClauseRules
from .date_patterns import DATE_PATTERNS
from .clause_rules import ClauseCategory
from .clause_rules import ConfidenceTier
from .contract_profiles import ContractType
from .contract_profiles import ContractProfiles
from .contract_profiles import ClauseDifference


__all__ = ['settings',
           'DateType',
           'Severity',
           'RiskLevel',
           'ClauseRules',
           'ContractType',
           'DATE_PATTERNS',
           'ClauseCategory',
           'ConfidenceTier',
           'ContractProfiles',
           'ClauseDifference',
          ]
