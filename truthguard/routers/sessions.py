from fastapi import APIRouter, HTTPException, Query, Request, status
import logging

from truthguard.core.errors import AnalysisInProgressError, EmptyTextError, SessionNotFoundError
from truthguard.models import HistoryFilterEnum
from truthguard.schemas import DetectionRequest, HistoryResponse, SessionState, Statistics
from truthguard.services.session import AnalysisSession

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/sessions",
    tags=["sessions"]
)


def _get_session(request: Request, session_id: str) -> AnalysisSession:
    try:
        return request.app.state.session_store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def create_session(request: Request):
    session = request.app.state.session_store.create()
    return session.state()


@router.get("/{session_id}", response_model=SessionState)
async def get_session(session_id: str, request: Request):
    return _get_session(request, session_id).state()


@router.post("/{session_id}/analyze", response_model=SessionState, status_code=status.HTTP_202_ACCEPTED)
async def start_analysis(
    session_id: str,
    payload: DetectionRequest,
    request: Request,
    wait: bool = Query(False, description="Respond only after the result is published"),
):
    """
    Start a delayed analysis for the session.

    Only one analysis may run per session; a second request while busy
    gets 409. The result replaces the session's current result once the
    synthetic delay has passed.
    """
    session = _get_session(request, session_id)
    try:
        pending = session.start(payload.content)
    except EmptyTextError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if wait:
        await pending
    return session.state()


@router.delete("/{session_id}/result", response_model=SessionState)
async def clear_result(session_id: str, request: Request):
    session = _get_session(request, session_id)
    session.clear()
    return session.state()


@router.get("/{session_id}/history", response_model=HistoryResponse)
async def get_history(
    session_id: str,
    request: Request,
    filter: HistoryFilterEnum = Query(HistoryFilterEnum.ALL),
):
    session = _get_session(request, session_id)
    return HistoryResponse(
        session_id=session.session_id,
        filter=filter.value,
        items=session.filtered_history(filter),
    )


@router.get("/{session_id}/statistics", response_model=Statistics)
async def get_statistics(session_id: str, request: Request):
    return _get_session(request, session_id).statistics()
