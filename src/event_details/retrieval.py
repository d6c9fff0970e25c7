"""Event detail retrieval service.

Retrievers must be swappable: the endpoint only depends on EventDetailRetriever.
"""

import json
import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from time import monotonic
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .converter import build_detail_json
from .errors import ErrorKind, RetrievalError

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class EventDetailRetriever(ABC):
    """Interface for looking up an event and rendering its detail JSON."""

    @abstractmethod
    def retrieve_event_details_json(
        self, identifier: str, debug: bool, timeout: float
    ) -> Optional[str]:
        """
        Return the serialized detail payload for an event.

        Must give up after ``timeout`` seconds.

        Raises:
            RetrievalError: If no payload can be produced. The kind
                SLIGHT_SEA_LEVEL_CHANGE marks an event that exists but is
                not surfaced.
        """
        ...


class HttpEventDetailRetriever(EventDetailRetriever):
    """Fetches raw earthquake records from an upstream JSON API."""

    def __init__(self, url_template: str) -> None:
        self._url_template = url_template

    def build_url(self, identifier: str) -> str:
        return self._url_template.format(id=quote(identifier, safe=""))

    def fetch_record(self, identifier: str, timeout: float) -> Dict[str, Any]:
        """
        Fetch the raw upstream record, giving up after ``timeout`` seconds in total.

        requests' own timeout bounds each socket wait, not the whole call, so
        the fetch runs in a worker thread and is abandoned at the deadline.
        """
        deadline = monotonic() + timeout
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._fetch_record, identifier, deadline, timeout)

        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError:
            raise RetrievalError(ErrorKind.TIMEOUT, f"Upstream timed out after {timeout}s")
        finally:
            # The worker stops at its next deadline check
            executor.shutdown(wait=False)

    def _fetch_record(self, identifier: str, deadline: float, timeout: float) -> Dict[str, Any]:
        url = self.build_url(identifier)

        try:
            response = requests.get(
                url,
                headers={"Accept": "application/json"},
                timeout=timeout,
                stream=True,
            )
        except requests.exceptions.Timeout:
            raise RetrievalError(ErrorKind.TIMEOUT, f"Upstream timed out after {timeout}s")
        except requests.exceptions.RequestException as e:
            raise RetrievalError(ErrorKind.UPSTREAM_ERROR, f"Request failed: {str(e)}")

        try:
            if response.status_code == 404:
                raise RetrievalError(ErrorKind.NOT_FOUND, f"Event {identifier} not found")

            if not 200 <= response.status_code < 300:
                raise RetrievalError(
                    ErrorKind.UPSTREAM_ERROR,
                    f"Upstream returned status {response.status_code}",
                )

            body = self._read_body(response, deadline, timeout)
        finally:
            response.close()

        try:
            record = json.loads(body)
        except ValueError:
            raise RetrievalError(ErrorKind.MALFORMED_RECORD, "Upstream body is not JSON")

        if not isinstance(record, dict):
            raise RetrievalError(ErrorKind.MALFORMED_RECORD, "Upstream body is not an object")

        return record

    @staticmethod
    def _read_body(response: requests.Response, deadline: float, timeout: float) -> bytes:
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
                if monotonic() > deadline:
                    raise RetrievalError(
                        ErrorKind.TIMEOUT, f"Upstream body not received within {timeout}s"
                    )
                chunks.append(chunk)
        except requests.exceptions.Timeout:
            raise RetrievalError(ErrorKind.TIMEOUT, f"Upstream timed out after {timeout}s")
        except requests.exceptions.RequestException as e:
            raise RetrievalError(ErrorKind.UPSTREAM_ERROR, f"Reading body failed: {str(e)}")

        return b"".join(chunks)

    def retrieve_event_details_json(
        self, identifier: str, debug: bool, timeout: float
    ) -> Optional[str]:
        record = self.fetch_record(identifier, timeout)
        logger.debug(f"Fetched upstream record for {identifier}")
        return build_detail_json(record, debug=debug)
