# DEPENDENCIES
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    model_config            = SettingsConfigDict(env_file          = ".env",
                                                 env_file_encoding = "utf-8",
                                                 case_sensitive    = True,
                                                 extra             = "ignore",
                                                )

    # Application Info
    APP_NAME                : str           = "Contract Clarity"
    APP_VERSION             : str           = "1.0.0"
    API_PREFIX              : str           = "/api/v1"

    # Server Configuration
    HOST                    : str           = "0.0.0.0"
    PORT                    : int           = 8000
    RELOAD                  : bool          = False
    WORKERS                 : int           = 1

    # CORS Settings
    CORS_ORIGINS            : list          = ["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:8000"]
    CORS_ALLOW_CREDENTIALS  : bool          = True
    CORS_ALLOW_METHODS      : list          = ["*"]
    CORS_ALLOW_HEADERS      : list          = ["*"]

    # File Upload Settings
    MAX_UPLOAD_SIZE         : int           = 10 * 1024 * 1024  # 10 MB
    MIN_UPLOAD_SIZE         : int           = 50                # smaller files are treated as corrupted
    ALLOWED_EXTENSIONS      : list          = [".pdf", ".docx", ".txt"]

    # Analysis Limits
    MAX_MATCHED_SENTENCES   : int           = 3
    MIN_SENTENCE_LENGTH     : int           = 10
    DATE_DESCRIPTION_LENGTH : int           = 150

    # Custom Clause Store
    CUSTOM_CLAUSES_FILE     : Path          = Path("data/custom_clauses.json")

    # Optional Remote Classifier
    CLASSIFIER_ENABLED      : bool          = False
    CLASSIFIER_URL          : Optional[str] = None
    CLASSIFIER_API_KEY      : Optional[str] = None
    CLASSIFIER_TIMEOUT      : int           = 30
    CLASSIFIER_BATCH_SIZE   : int           = 10

    # Logging Settings
    LOG_LEVEL               : str           = "INFO"
    LOG_DIR                 : Path          = Path("logs")
    LOG_FORMAT              : str           = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
