class ContractClarityError(Exception):
    """
    Base class for errors raised at collaborator boundaries
    """


class DocumentValidationError(ContractClarityError):
    """
    Uploaded document rejected before text extraction
    """


class CustomClauseStoreError(ContractClarityError):
    """
    Custom clause store unreadable, or an import payload is malformed
    """


class ClassifierUnavailableError(ContractClarityError):
    """
    Remote clause classifier disabled, unreachable or returned a bad payload
    """
