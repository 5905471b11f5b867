from fastapi import APIRouter, HTTPException, Request
import logging

from truthguard.core.errors import EmptyTextError
from truthguard.schemas import DetectionRequest, DetectionResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["detection"]
)


@router.post("/detect", response_model=DetectionResult)
async def detect_news(payload: DetectionRequest, request: Request):
    """
    Analyze a news statement with the heuristic detector.

    Args:
        payload: DetectionRequest with the text in the content field

    Returns:
        DetectionResult with prediction, confidence (55-95), explanation,
        factors, contextual info, news report and detailed analysis
    """
    try:
        logger.debug(f"Analyzing text of length: {len(payload.content)}")
        return await request.app.state.detection_service.analyze_news(payload.content)
    except EmptyTextError as e:
        raise HTTPException(status_code=400, detail=str(e))
