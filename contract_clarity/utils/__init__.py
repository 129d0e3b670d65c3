# DEPENDENCIES
from .text_processor import TextProcessor
from .validators import DocumentValidator
from .logger import ContractClarityLogger


__all__ = ['TextProcessor',
           'DocumentValidator',
           'ContractClarityLogger',
          ]
