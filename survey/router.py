# survey/router.py
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request

from .models import (
    AcceptedResponse,
    DraftResponse,
    DraftState,
    FieldEvent,
    SubmitSurveyResponse,
    SurveySummary,
    ValidationReport,
    ViewRequest,
)
from .schema import get_form_schema
from .session import SurveySession
from .validator import validate

router = APIRouter()


def get_session(request: Request) -> SurveySession:
    return request.app.state.survey_session


def _draft_state(session: SurveySession) -> DraftState:
    draft, errors, view = session.form_state()
    return DraftState(draft=draft, errors=errors, view=view)


def _rejected(errors: Dict[str, str]) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": "Survey has validation errors.", "errors": errors},
    )


@router.get(
    "/schema",
    summary="Get the survey form description",
)
def get_schema() -> Dict[str, Any]:
    return get_form_schema()


# ---------------------------------------------------------------------
# Session draft
# ---------------------------------------------------------------------
@router.get(
    "/draft",
    summary="Get the draft being filled in, its last errors and the current view",
    response_model=DraftState,
)
def get_draft(session: SurveySession = Depends(get_session)) -> DraftState:
    return _draft_state(session)


@router.post(
    "/draft/events",
    summary="Apply one input change (text, date, food or rating) to the draft",
    response_model=DraftState,
)
def post_event(event: FieldEvent, session: SurveySession = Depends(get_session)) -> DraftState:
    session.apply(event)
    return _draft_state(session)


@router.post(
    "/draft/reset",
    summary="Discard the draft and start from a blank form",
    response_model=DraftState,
)
def reset_draft(session: SurveySession = Depends(get_session)) -> DraftState:
    session.reset()
    return _draft_state(session)


@router.post(
    "/draft/submit",
    summary="Validate and submit the session draft",
    response_model=SubmitSurveyResponse,
)
def submit_session_draft(session: SurveySession = Depends(get_session)) -> SubmitSurveyResponse:
    accepted = session.submit()
    if accepted is None:
        _, errors, _ = session.form_state()
        raise _rejected(errors)
    return SubmitSurveyResponse(record_id=accepted.id)


@router.post(
    "/view",
    summary="Switch between the survey form and the results view",
    response_model=DraftState,
)
def set_view(req: ViewRequest, session: SurveySession = Depends(get_session)) -> DraftState:
    session.show(req.view)
    return _draft_state(session)


# ---------------------------------------------------------------------
# Stateless draft handling
# ---------------------------------------------------------------------
@router.post(
    "/validate",
    summary="Check a draft without submitting it",
    response_model=ValidationReport,
)
def validate_draft(draft: DraftResponse) -> ValidationReport:
    errors = validate(draft)
    return ValidationReport(valid=not errors, errors=errors)


@router.post(
    "/submit",
    summary="Validate and submit a complete draft (kept in memory only)",
    response_model=SubmitSurveyResponse,
)
def submit(draft: DraftResponse, session: SurveySession = Depends(get_session)) -> SubmitSurveyResponse:
    accepted, errors = session.submit_draft(draft)
    if accepted is None:
        raise _rejected(errors)
    return SubmitSurveyResponse(record_id=accepted.id)


# ---------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------
@router.get(
    "/responses",
    summary="List accepted responses in submission order",
    response_model=List[AcceptedResponse],
)
def list_responses(session: SurveySession = Depends(get_session)) -> List[AcceptedResponse]:
    return list(session.responses())


@router.get(
    "/results",
    summary="Aggregate statistics, or the empty-state marker when nothing was submitted",
    response_model=SurveySummary,
)
def get_results(session: SurveySession = Depends(get_session)):
    return session.results()
