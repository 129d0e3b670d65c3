# DEPENDENCIES
import sys
import json
import time
import signal
import uvicorn
from typing import Any
from typing import Dict
from typing import List
from fastapi import Body
from fastapi import File
from pydantic import Field
from fastapi import FastAPI
from fastapi import Request
from typing import Optional
from datetime import datetime
from pydantic import BaseModel
from fastapi import UploadFile
from pydantic import ConfigDict
from fastapi import HTTPException
from fastapi.responses import Response
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from contract_clarity.utils.logger import log_info
from contract_clarity.utils.logger import log_error
from contract_clarity.config.settings import settings
from contract_clarity.config.clause_rules import Severity
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.utils.validators import DocumentValidator
from contract_clarity.exceptions import CustomClauseStoreError
from contract_clarity.exceptions import DocumentValidationError
from contract_clarity.services.data_models import CustomClauseRule
from contract_clarity.exceptions import ClassifierUnavailableError
from contract_clarity.services.calendar_export import export_icalendar
from contract_clarity.services.contract_profiler import compare_analyses
from contract_clarity.services.contract_analyzer import ContractAnalyzer
from contract_clarity.services.custom_clause_store import CustomClauseStore
from contract_clarity.services.remote_classifier import RemoteClauseClassifier


# PYDANTIC SCHEMAS
class HealthResponse(BaseModel):
    status             : str
    version            : str
    timestamp          : str
    uptime_seconds     : float
    classifier_enabled : bool
    custom_clauses     : int


class CustomClauseInput(BaseModel):
    model_config = ConfigDict(populate_by_name = True)

    name         : str           = Field(..., min_length = 1)
    keywords     : List[str]     = Field(..., min_length = 1)
    category     : str           = "custom"
    description  : str           = ""
    risk_level   : Severity      = Field(default = Severity.MEDIUM, alias = "riskLevel")


class CustomClauseUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name = True)

    name         : Optional[str]       = Field(default = None, min_length = 1)
    keywords     : Optional[List[str]] = Field(default = None, min_length = 1)
    category     : Optional[str]       = None
    description  : Optional[str]       = None
    risk_level   : Optional[Severity]  = Field(default = None, alias = "riskLevel")


class AnalyzeTextRequest(BaseModel):
    model_config      = ConfigDict(populate_by_name = True)

    text              : str                               = Field(..., description = "Contract text to analyze")
    custom_rules      : Optional[List[CustomClauseInput]] = Field(default = None, alias = "customRules")
    use_stored_rules  : bool                              = Field(default = True, alias = "useStoredRules")


class CompareTextRequest(BaseModel):
    model_config      = ConfigDict(populate_by_name = True)

    first             : str  = Field(..., description = "Text of the first contract")
    second            : str  = Field(..., description = "Text of the second contract")
    use_stored_rules  : bool = Field(default = True, alias = "useStoredRules")


class DatesRequest(BaseModel):
    text : str
    now  : Optional[datetime] = None


class FileValidationResponse(BaseModel):
    valid      : bool
    analyzable : bool
    message    : str


class ErrorResponse(BaseModel):
    error     : str
    detail    : str
    timestamp : str


class AnalysisService:
    """
    Analysis engine and custom clause store shared by all requests
    """
    def __init__(self):
        self.classifier = None

        if settings.CLASSIFIER_ENABLED and settings.CLASSIFIER_URL:
            self.classifier = RemoteClauseClassifier()

        self.analyzer   = ContractAnalyzer(classifier = self.classifier)
        self.store      = CustomClauseStore()


    def resolve_rules(self, inline_rules: Optional[List[CustomClauseInput]], use_stored_rules: bool) -> List[CustomClauseRule]:
        rules = self.store.list() if use_stored_rules else list()

        for rule in (inline_rules or []):
            rules.append(CustomClauseRule(name        = rule.name,
                                          keywords    = list(rule.keywords),
                                          category    = rule.category,
                                          description = rule.description,
                                          risk_level  = rule.risk_level,
                                         ))

        return rules



# FASTAPI APPLICATION : Global instances
analysis_service    : Optional[AnalysisService] = None
app_start_time                                  = time.time()

# Binary formats need text extraction before they reach the analyzer
ANALYZABLE_EXTENSION                            = ".txt"
NOT_ANALYZABLE_MESSAGE                          = "Only plain-text (.txt) uploads can be analyzed; extract PDF or DOCX text first"


@asynccontextmanager
async def lifespan(app: FastAPI):
    global analysis_service

    log_info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting up")

    analysis_service = AnalysisService()

    log_info("Analysis service ready",
             host               = settings.HOST,
             port               = settings.PORT,
             classifier_enabled = analysis_service.classifier is not None,
             custom_clauses     = str(settings.CUSTOM_CLAUSES_FILE),
            )

    try:
        yield

    finally:
        analysis_service = None
        log_info("Server shutdown complete")


# Define the application
app = FastAPI(title       = settings.APP_NAME,
              version     = settings.APP_VERSION,
              description = "Employment contract clause and risk analysis",
              docs_url    = "/api/docs",
              redoc_url   = "/api/redoc",
              lifespan    = lifespan,
             )

# CORS middleware
app.add_middleware(CORSMiddleware,
                   allow_origins     = settings.CORS_ORIGINS,
                   allow_credentials = settings.CORS_ALLOW_CREDENTIALS,
                   allow_methods     = settings.CORS_ALLOW_METHODS,
                   allow_headers     = settings.CORS_ALLOW_HEADERS,
                  )


# HELPER FUNCTIONS
def get_service() -> AnalysisService:
    if not analysis_service:
        raise HTTPException(status_code = 503,
                            detail      = "Service not initialized",
                           )

    return analysis_service


def validate_contract_text(text: str):
    if not text or not text.strip():
        raise HTTPException(status_code = 400,
                            detail      = "Contract text is empty",
                           )


async def read_upload(file: UploadFile) -> bytes:
    content = await file.read()

    DocumentValidator.ensure_valid_upload(file_name    = file.filename or "",
                                          size         = len(content),
                                          content_type = file.content_type,
                                         )
    return content



# API ROUTES
@app.get(f"{settings.API_PREFIX}/health", response_model = HealthResponse)
async def health_check():
    service = get_service()

    return HealthResponse(status             = "healthy",
                          version            = settings.APP_VERSION,
                          timestamp          = datetime.now().isoformat(),
                          uptime_seconds     = round(time.time() - app_start_time, 3),
                          classifier_enabled = service.classifier is not None,
                          custom_clauses     = len(service.store.list()),
                         )


@app.post(f"{settings.API_PREFIX}/analyze/text")
async def analyze_contract_text(request: AnalyzeTextRequest):
    service = get_service()
    validate_contract_text(request.text)

    rules   = service.resolve_rules(request.custom_rules, request.use_stored_rules)
    result  = service.analyzer.analyze(TextProcessor.normalize_text(request.text), custom_rules = rules)

    log_info("Text analysis completed",
             clauses    = len(result.clauses),
             risk_score = result.risk_score.score,
            )

    return result.to_dict()


@app.post(f"{settings.API_PREFIX}/compare/text")
async def compare_contract_texts(request: CompareTextRequest):
    service = get_service()
    validate_contract_text(request.first)
    validate_contract_text(request.second)

    rules      = service.resolve_rules(None, request.use_stored_rules)
    first      = service.analyzer.analyze(TextProcessor.normalize_text(request.first), custom_rules = rules)
    second     = service.analyzer.analyze(TextProcessor.normalize_text(request.second), custom_rules = rules)
    comparison = compare_analyses(first, second)

    log_info("Contract comparison completed",
             categories       = len(comparison.clauses),
             score_difference = comparison.score_difference,
            )

    return comparison.to_dict()


@app.post(f"{settings.API_PREFIX}/analyze/file")
async def analyze_contract_file(file: UploadFile = File(...)):
    service   = get_service()
    content   = await read_upload(file)
    extension = DocumentValidator.get_extension(file.filename or "")

    if (extension != ANALYZABLE_EXTENSION):
        raise HTTPException(status_code = 400,
                            detail      = NOT_ANALYZABLE_MESSAGE,
                           )

    text      = content.decode("utf-8", errors = "replace")
    validate_contract_text(text)

    report    = service.analyzer.analyze_document(raw_text     = text,
                                                  file_name    = file.filename,
                                                  file_type    = extension.lstrip("."),
                                                  custom_rules = service.store.list(),
                                                 )

    log_info("File analysis completed",
             filename   = file.filename,
             word_count = report.word_count,
             risk_score = report.analysis.risk_score.score,
            )

    return report.to_dict()


@app.post(f"{settings.API_PREFIX}/dates")
async def extract_contract_dates(request: DatesRequest):
    service = get_service()
    dates   = service.analyzer.extract_dates(request.text, now = request.now)

    return {"dates": [contract_date.to_dict() for contract_date in dates]}


@app.post(f"{settings.API_PREFIX}/dates/calendar")
async def export_contract_dates(request: DatesRequest):
    service  = get_service()
    dates    = service.analyzer.extract_dates(request.text, now = request.now)
    calendar = export_icalendar(dates, now = request.now)

    return Response(content    = calendar,
                    media_type = "text/calendar",
                    headers    = {"Content-Disposition": "attachment; filename=contract-dates.ics"},
                   )


@app.post(f"{settings.API_PREFIX}/validate/file", response_model = FileValidationResponse)
async def validate_contract_file(file: UploadFile = File(...)):
    content           = await file.read()
    is_valid, message = DocumentValidator.validate_upload(file_name    = file.filename or "",
                                                          size         = len(content),
                                                          content_type = file.content_type,
                                                         )

    analyzable        = is_valid and (DocumentValidator.get_extension(file.filename or "") == ANALYZABLE_EXTENSION)

    if is_valid and not analyzable:
        message = f"{message}. {NOT_ANALYZABLE_MESSAGE}"

    return FileValidationResponse(valid      = is_valid,
                                  analyzable = analyzable,
                                  message    = message,
                                 )


@app.get(f"{settings.API_PREFIX}/custom-clauses")
async def list_custom_clauses():
    service = get_service()

    return {"clauses": [rule.to_dict() for rule in service.store.list()]}


@app.post(f"{settings.API_PREFIX}/custom-clauses", status_code = 201)
async def create_custom_clause(clause: CustomClauseInput):
    service = get_service()
    rule    = service.store.add(name        = clause.name,
                                keywords    = clause.keywords,
                                category    = clause.category,
                                description = clause.description,
                                risk_level  = clause.risk_level,
                               )

    return rule.to_dict()


@app.put(f"{settings.API_PREFIX}/custom-clauses/{{rule_id}}")
async def update_custom_clause(rule_id: str, clause: CustomClauseUpdate):
    service = get_service()
    rule    = service.store.update(rule_id, **clause.model_dump(exclude_unset = True))

    if rule is None:
        raise HTTPException(status_code = 404,
                            detail      = f"Custom clause {rule_id} not found",
                           )

    return rule.to_dict()


@app.delete(f"{settings.API_PREFIX}/custom-clauses/{{rule_id}}")
async def delete_custom_clause(rule_id: str):
    service = get_service()

    if not service.store.delete(rule_id):
        raise HTTPException(status_code = 404,
                            detail      = f"Custom clause {rule_id} not found",
                           )

    return {"deleted": rule_id}


@app.delete(f"{settings.API_PREFIX}/custom-clauses")
async def clear_custom_clauses():
    get_service().store.clear()

    return {"cleared": True}


@app.get(f"{settings.API_PREFIX}/custom-clauses/export")
async def export_custom_clauses():
    return Response(content    = get_service().store.export_json(),
                    media_type = "application/json",
                    headers    = {"Content-Disposition": "attachment; filename=custom-clauses.json"},
                   )


@app.post(f"{settings.API_PREFIX}/custom-clauses/import")
async def import_custom_clauses(clauses: List[Dict[str, Any]] = Body(...)):
    count = get_service().store.import_json(json.dumps(clauses))

    return {"imported": count}



# ERROR HANDLERS AND MIDDLEWARE
def error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code = status_code,
                        content     = ErrorResponse(error     = error,
                                                    detail    = detail,
                                                    timestamp = datetime.now().isoformat(),
                                                   ).model_dump(),
                       )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(exc.status_code, str(exc.detail), str(exc.detail))


@app.exception_handler(DocumentValidationError)
async def document_validation_handler(request: Request, exc: DocumentValidationError):
    log_error(exc, context = {"path": request.url.path})

    return error_response(400, "Invalid document", str(exc))


@app.exception_handler(CustomClauseStoreError)
async def custom_clause_store_handler(request: Request, exc: CustomClauseStoreError):
    log_error(exc, context = {"path": request.url.path})

    return error_response(503, "Custom clause store unavailable", str(exc))


@app.exception_handler(ClassifierUnavailableError)
async def classifier_unavailable_handler(request: Request, exc: ClassifierUnavailableError):
    log_error(exc, context = {"path": request.url.path})

    return error_response(503, "Classifier unavailable", str(exc))


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time   = time.time()
    response     = await call_next(request)
    process_time = time.time() - start_time

    log_info(f"API Request: {request.method} {request.url.path}",
             status           = response.status_code,
             duration_seconds = round(process_time, 3),
            )

    return response



# MAIN
def main():
    def signal_handler(sig, frame):
        print("\nReceived Ctrl+C, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    try:
        uvicorn.run("contract_clarity.app:app",
                    host      = settings.HOST,
                    port      = settings.PORT,
                    reload    = settings.RELOAD,
                    workers   = settings.WORKERS,
                    log_level = settings.LOG_LEVEL.lower(),
                   )

    except Exception as e:
        log_error(e, context = {"component": "server"})
        sys.exit(1)


if __name__ == "__main__":
    main()
