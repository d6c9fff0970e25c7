import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ..config import settings
from ..outcome import Success, Suppressed, fetch_outcome
from ..retrieval import EventDetailRetriever, HttpEventDetailRetriever

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])

# Literal value of the debug query parameter that enables debug rendering
DEBUG_TOKEN = "dummy"

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

default_retriever = HttpEventDetailRetriever(settings.upstream_url_template)


def get_retriever() -> EventDetailRetriever:
    return default_retriever


def is_debug(debug: Optional[str]) -> bool:
    return debug == DEBUG_TOKEN


@router.get("/details")
def get_event_details(
    event_id: Optional[str] = Query(default=None, alias="id"),
    debug: Optional[str] = None,
    retriever: EventDetailRetriever = Depends(get_retriever),
):
    """
    Get detailed information about a single event.

    Query Parameters:
    - id: The event identifier (required)
    - debug: Pass "dummy" for an indented rendering that includes the raw record

    Responses (body is always empty unless 200):
    - 200: Event detail JSON, passed through verbatim
    - 204: Event exists but is not surfaced (slight sea-level change)
    - 400: Missing id, or the event could not be retrieved
    """
    if not event_id:
        logger.info("Rejected event details request without id")
        return Response(status_code=status.HTTP_400_BAD_REQUEST, headers=CORS_HEADERS)

    outcome = fetch_outcome(
        retriever,
        event_id,
        debug=is_debug(debug),
        timeout=settings.retrieval_timeout_seconds,
    )

    if isinstance(outcome, Success):
        return Response(
            content=outcome.payload,
            status_code=status.HTTP_200_OK,
            headers=CORS_HEADERS,
            media_type="application/json",
        )

    if isinstance(outcome, Suppressed):
        logger.info(f"Event {event_id} suppressed: slight sea-level change")
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)

    logger.warning(f"Failed to retrieve event {event_id}: {outcome.error or 'empty payload'}")
    return Response(status_code=status.HTTP_400_BAD_REQUEST, headers=CORS_HEADERS)
