"""Tests for OperationHandler."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from support import CallingTwiceMiddleware, Counter, RecordingMiddleware

from bookmark_bureau.pipeline import OperationHandler
from bookmark_bureau.primitives.exceptions import OperationPipelineError


def test_handler_without_middleware_runs_operation() -> None:
    operation = MagicMock(return_value="result")

    assert OperationHandler([]).handle(operation, "input") == "result"
    operation.assert_called_once_with("input")


def test_handler_runs_middleware_in_order() -> None:
    calls: list[str] = []
    handler = OperationHandler(
        [RecordingMiddleware("mw1", calls), RecordingMiddleware("mw2", calls)]
    )

    def operation(data):
        calls.append("operation")
        return Counter(data.value + 1)

    assert handler.handle(operation, Counter(1)) == Counter(2)
    assert calls == ["mw1_before", "mw2_before", "operation", "mw2_after", "mw1_after"]


def test_handler_defaults_data_to_none() -> None:
    operation = MagicMock(return_value=None)

    assert OperationHandler([]).handle(operation) is None
    operation.assert_called_once_with(None)


def test_handler_can_only_be_called_once() -> None:
    handler = OperationHandler([])
    handler.handle(lambda d: d, None)

    assert handler.called
    with pytest.raises(
        OperationPipelineError, match="Handler already called, cannot process twice"
    ):
        handler.handle(lambda d: d, None)


@pytest.mark.parametrize("data", [None, "link", Counter(3)])
def test_middleware_calling_next_twice_is_rejected(data) -> None:
    operation = MagicMock(return_value="result")
    handler = OperationHandler([CallingTwiceMiddleware()])

    with pytest.raises(OperationPipelineError):
        handler.handle(operation, data)

    # the first continuation ran, the second was refused
    operation.assert_called_once_with(data)


def test_inner_middleware_calling_next_twice_is_rejected() -> None:
    calls: list[str] = []
    operation = MagicMock()
    handler = OperationHandler(
        [RecordingMiddleware("outer", calls), CallingTwiceMiddleware()]
    )

    with pytest.raises(OperationPipelineError):
        handler.handle(operation, None)

    assert calls == ["outer_before"]
    operation.assert_called_once_with(None)


def test_short_circuit_is_allowed() -> None:
    class ShortCircuit:
        def process(self, data, next_handler):
            return "denied"

    operation = MagicMock()

    assert OperationHandler([ShortCircuit()]).handle(operation, None) == "denied"
    operation.assert_not_called()


def test_operation_errors_propagate_unchanged() -> None:
    error = KeyError("missing")
    calls: list[str] = []

    def operation(data):
        raise error

    with pytest.raises(KeyError) as exc:
        OperationHandler([RecordingMiddleware("mw", calls)]).handle(operation, None)

    assert exc.value is error
    assert calls == ["mw_before"]
