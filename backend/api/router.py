import asyncio

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_ranker
from config import settings
from models.requests import (
    ClarificationRequest,
    EmailRequest,
    JobDescriptionRequest,
    QuestionRequest,
    QuickAnalyzeRequest,
    SolutionRequest,
)
from models.responses import (
    AnalysisReport,
    ClarificationResponse,
    EmailResult,
    InterviewConfig,
    RankerState,
    UploadResult,
)
from models.schemas.interview import InterviewQuestion, Scorecard
from services import interview, resume_analyzer, text_extractor
from services.ranker import CandidateNotFoundError, CandidateRanker, NoSelectionError, UploadedDocument

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _max_upload_bytes() -> int:
    return settings.max_upload_size_mb * 1024 * 1024


def _check_job_description(job_description: str) -> None:
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )


def _run_analysis(resume_text: str, job_description: str) -> AnalysisReport:
    try:
        resume_analyzer.validate_inputs(resume_text, job_description)
    except resume_analyzer.InputRejectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return resume_analyzer.analyze(resume_text, job_description)


def _state(ranker: CandidateRanker) -> RankerState:
    return RankerState(
        job_description=ranker.job_description,
        candidates=ranker.candidates,
        selected=ranker.selected,
    )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


# ---------------------------------------------------------------------------
# Single resume analysis
# ---------------------------------------------------------------------------


@router.post("/analyze", response_model=AnalysisReport)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    content = await resume_file.read()
    if len(content) > _max_upload_bytes():
        raise HTTPException(
            status_code=400,
            detail=f"File size exceeds {settings.max_upload_size_mb}MB. Please upload a smaller file.",
        )
    _check_job_description(job_description)

    try:
        resume_text = await asyncio.to_thread(
            text_extractor.extract_text,
            content,
            resume_file.content_type or "",
            resume_file.filename or "",
        )
    except text_extractor.ExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _run_analysis(resume_text, job_description)


@router.post("/analyze/quick", response_model=AnalysisReport)
@limiter.limit("10/minute")
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return _run_analysis(body.resume_text, body.job_description)


# ---------------------------------------------------------------------------
# Bulk ranker
# ---------------------------------------------------------------------------


@router.get("/ranker/candidates", response_model=RankerState)
async def list_candidates(ranker: CandidateRanker = Depends(get_ranker)):
    return _state(ranker)


@router.post("/ranker/candidates", response_model=UploadResult)
async def upload_candidates(
    files: list[UploadFile] = File(...),
    ranker: CandidateRanker = Depends(get_ranker),
):
    documents = []
    for upload in files:
        documents.append(UploadedDocument(
            file_name=upload.filename or "resume",
            content=await upload.read(),
            mime_type=upload.content_type or "",
        ))
    added, failures = await ranker.ingest(documents, max_bytes=_max_upload_bytes())
    return UploadResult(added=added, failures=failures, state=_state(ranker))


@router.put("/ranker/job-description", response_model=RankerState)
async def set_job_description(
    body: JobDescriptionRequest,
    ranker: CandidateRanker = Depends(get_ranker),
):
    ranker.job_description = body.job_description
    return _state(ranker)


@router.delete("/ranker/candidates/{candidate_id}", response_model=RankerState)
async def delete_candidate(candidate_id: str, ranker: CandidateRanker = Depends(get_ranker)):
    try:
        ranker.delete(candidate_id)
    except CandidateNotFoundError:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return _state(ranker)


@router.delete("/ranker/candidates", response_model=RankerState)
async def clear_candidates(ranker: CandidateRanker = Depends(get_ranker)):
    ranker.clear()
    return _state(ranker)


@router.post("/ranker/selection", response_model=RankerState)
async def select_all(ranker: CandidateRanker = Depends(get_ranker)):
    ranker.select_all()
    return _state(ranker)


@router.delete("/ranker/selection", response_model=RankerState)
async def clear_selection(ranker: CandidateRanker = Depends(get_ranker)):
    ranker.clear_selection()
    return _state(ranker)


@router.post("/ranker/selection/{candidate_id}", response_model=RankerState)
async def toggle_selection(candidate_id: str, ranker: CandidateRanker = Depends(get_ranker)):
    try:
        ranker.toggle_selection(candidate_id)
    except CandidateNotFoundError:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return _state(ranker)


@router.post("/ranker/email", response_model=EmailResult)
async def send_emails(body: EmailRequest, ranker: CandidateRanker = Depends(get_ranker)):
    try:
        prepared, selected_count = ranker.send_emails(body.subject, body.message)
    except NoSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EmailResult(
        prepared=prepared,
        selected_count=selected_count,
        detail=(
            f"Email templates prepared for {selected_count} candidates. "
            "No email was sent; connect an email service to deliver them."
        ),
    )


# ---------------------------------------------------------------------------
# Mock interview
# ---------------------------------------------------------------------------


@router.get("/interview/config", response_model=InterviewConfig)
async def interview_config():
    return InterviewConfig(
        duration_seconds=interview.INTERVIEW_DURATION_SECONDS,
        difficulties=list(interview.DIFFICULTIES),
        language_templates=dict(interview.LANGUAGE_TEMPLATES),
    )


@router.post("/interview/question", response_model=InterviewQuestion)
@limiter.limit("10/minute")
async def interview_question(request: Request, body: QuestionRequest):
    try:
        return await interview.generate_question(body.difficulty)
    except interview.GenerationFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/interview/clarify", response_model=ClarificationResponse)
@limiter.limit("20/minute")
async def interview_clarify(request: Request, body: ClarificationRequest):
    try:
        reply = await interview.ask_clarification(body.question)
    except interview.GenerationFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ClarificationResponse(reply=reply)


@router.post("/interview/evaluate", response_model=Scorecard)
@limiter.limit("10/minute")
async def interview_evaluate(request: Request, body: SolutionRequest):
    try:
        return await interview.evaluate_solution(body.language, body.problem, body.code)
    except interview.UnknownLanguageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except interview.GenerationFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))
