from unittest.mock import MagicMock

from event_details.errors import ErrorKind, RetrievalError, SlightSeaLevelChangeError
from event_details.outcome import Failure, Success, Suppressed, fetch_outcome
from event_details.retrieval import EventDetailRetriever


def make_retriever(**kwargs):
    retriever = MagicMock(spec=EventDetailRetriever)
    retriever.retrieve_event_details_json.configure_mock(**kwargs)
    return retriever


def test_payload_is_success():
    retriever = make_retriever(return_value='{"id":"E1"}')

    outcome = fetch_outcome(retriever, "E1", debug=False, timeout=1.0)

    assert outcome == Success(payload='{"id":"E1"}')
    retriever.retrieve_event_details_json.assert_called_once_with(
        "E1", debug=False, timeout=1.0
    )


def test_suppressed_kind_is_suppressed():
    retriever = make_retriever(side_effect=SlightSeaLevelChangeError("E2"))

    assert fetch_outcome(retriever, "E2", debug=True, timeout=1.0) == Suppressed()


def test_suppressed_kind_raised_as_plain_retrieval_error():
    """Classification looks at the kind, not the exception class"""
    retriever = make_retriever(
        side_effect=RetrievalError(ErrorKind.SLIGHT_SEA_LEVEL_CHANGE)
    )

    assert isinstance(fetch_outcome(retriever, "E2", debug=False, timeout=1.0), Suppressed)


def test_other_kind_is_failure_with_error():
    error = RetrievalError(ErrorKind.NOT_FOUND, "missing")
    retriever = make_retriever(side_effect=error)

    outcome = fetch_outcome(retriever, "E3", debug=False, timeout=1.0)

    assert isinstance(outcome, Failure)
    assert outcome.error is error


def test_none_payload_is_failure():
    retriever = make_retriever(return_value=None)

    outcome = fetch_outcome(retriever, "E3", debug=False, timeout=1.0)

    assert outcome == Failure()


def test_unexpected_exception_is_failure():
    retriever = make_retriever(side_effect=KeyError("earthquake"))

    outcome = fetch_outcome(retriever, "E3", debug=False, timeout=1.0)

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, KeyError)


def test_only_slight_sea_level_change_is_suppressed():
    suppressed = [kind for kind in ErrorKind if kind.is_suppressed]

    assert suppressed == [ErrorKind.SLIGHT_SEA_LEVEL_CHANGE]
