# DEPENDENCIES
from typing import Tuple
from pathlib import Path
from typing import Optional
from contract_clarity.config.settings import settings
from contract_clarity.exceptions import DocumentValidationError


class DocumentValidator:
    """
    Validate uploaded contract files before handing them to text extraction
    """
    ALLOWED_CONTENT_TYPES = ("application/pdf",
                             "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                             "text/plain",
                            )

    EMPTY_MESSAGE         = "The uploaded file is empty. Please select a file with content."
    UNSUPPORTED_MESSAGE   = "Unsupported file format. Please upload a PDF, DOCX, or TXT file."
    TOO_LARGE_MESSAGE     = "File size exceeds 10MB limit. Please upload a smaller file."
    CORRUPTED_MESSAGE     = "The file appears to be corrupted or incomplete. Please try a different file."


    @staticmethod
    def get_extension(file_name: str) -> str:
        """
        Lower-cased extension including the dot (".pdf"), or "" when absent
        """
        return Path(file_name or "").suffix.lower()


    @staticmethod
    def validate_upload(file_name: str, size: int, content_type: Optional[str] = None) -> Tuple[bool, str]:
        """
        Check an upload against size and format constraints

        Arguments:
        ----------
            file_name    { str } : Original file name

            size         { int } : Size in bytes

            content_type { str } : MIME type reported by the client (optional)

        Returns:
        --------
               { tuple }         : (is_valid, message) tuple
        """
        if (size == 0):
            return (False, DocumentValidator.EMPTY_MESSAGE)

        extension     = DocumentValidator.get_extension(file_name)
        is_valid_type = (content_type in DocumentValidator.ALLOWED_CONTENT_TYPES) or (extension in settings.ALLOWED_EXTENSIONS)

        if not is_valid_type:
            return (False, DocumentValidator.UNSUPPORTED_MESSAGE)

        if (size > settings.MAX_UPLOAD_SIZE):
            return (False, DocumentValidator.TOO_LARGE_MESSAGE)

        if (size < settings.MIN_UPLOAD_SIZE):
            return (False, DocumentValidator.CORRUPTED_MESSAGE)

        return (True, "File is valid")


    @staticmethod
    def ensure_valid_upload(file_name: str, size: int, content_type: Optional[str] = None) -> str:
        """
        Raise DocumentValidationError for a rejected upload, return its extension otherwise
        """
        is_valid, message = DocumentValidator.validate_upload(file_name    = file_name,
                                                              size         = size,
                                                              content_type = content_type,
                                                             )

        if not is_valid:
            raise DocumentValidationError(message)

        return DocumentValidator.get_extension(file_name)
