# DEPENDENCIES
from .services.contract_analyzer import analyze
from .services.contract_analyzer import extract_dates
from .services.contract_analyzer import ContractAnalyzer


__version__ = "1.0.0"

__all__ = ['analyze',
           'extract_dates',
           'ContractAnalyzer',
          ]
