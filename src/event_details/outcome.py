"""Classification of a retrieval call into Success, Suppressed or Failure.

The endpoint maps each case to exactly one HTTP response:

- ``Success``    -> 200 with the payload written verbatim
- ``Suppressed`` -> 204, empty body
- ``Failure``    -> 400, empty body
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import RetrievalError
from .retrieval import EventDetailRetriever

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    payload: str


@dataclass(frozen=True)
class Suppressed:
    pass


@dataclass(frozen=True)
class Failure:
    # Kept for logging only, never sent to the client
    error: Optional[Exception] = None


Outcome = Union[Success, Suppressed, Failure]


def fetch_outcome(
    retriever: EventDetailRetriever,
    identifier: str,
    debug: bool,
    timeout: float,
) -> Outcome:
    """
    Call the retriever once and classify the result.

    A RetrievalError whose kind is the suppressed case becomes Suppressed.
    Any other error, and a missing or empty payload, becomes Failure.
    """
    try:
        payload = retriever.retrieve_event_details_json(
            identifier, debug=debug, timeout=timeout
        )
    except RetrievalError as e:
        if e.kind.is_suppressed:
            return Suppressed()
        return Failure(error=e)
    except Exception as e:
        logger.exception(f"Unexpected error retrieving event {identifier}")
        return Failure(error=e)

    if not payload:
        return Failure()

    return Success(payload=payload)
