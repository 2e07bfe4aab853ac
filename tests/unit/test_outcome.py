"""Value-less outcomes: construction, queries and branching."""

from __future__ import annotations

import dataclasses

import pytest

from verdict import (
    Err,
    ErrorInfo,
    Failure,
    InvalidArgumentError,
    Ok,
    ResultCode,
    Success,
    err,
    ok,
)

pytestmark = pytest.mark.unit


class TestOk:
    def test_success_has_no_error(self) -> None:
        outcome = ok()

        assert isinstance(outcome, Ok)
        assert outcome.is_success is True
        assert outcome.error is None

    def test_describe(self) -> None:
        assert ok().describe() == "Success"
        assert str(ok()) == "Success"

    def test_decompose(self) -> None:
        is_success, error = ok().decompose()

        assert is_success is True
        assert error is None

    def test_successes_compare_equal(self) -> None:
        assert ok() == Ok()


class TestErr:
    def test_failure_from_error_info(self) -> None:
        info = ErrorInfo("NotFound", "Item 7 not found")
        outcome = err(info)

        assert isinstance(outcome, Err)
        assert outcome.is_success is False
        assert outcome.error is info

    def test_failure_from_well_known_code(self) -> None:
        outcome = err(ResultCode.NOT_FOUND, "missing")

        assert outcome.error == ErrorInfo("NotFound", "missing")

    def test_failure_from_custom_code(self) -> None:
        assert err("Teapot", "short and stout").error.code == "Teapot"

    def test_describe(self) -> None:
        outcome = err(ErrorInfo("NotFound", "Item 7 not found"))

        assert outcome.describe() == "Failure: NotFound: Item 7 not found"
        assert str(outcome) == outcome.describe()

    def test_decompose(self) -> None:
        info = ErrorInfo.conflict("duplicate")

        assert err(info).decompose() == (False, info)

    def test_none_error_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            err(None)  # type: ignore[call-overload]

    def test_direct_construction_validates_error(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Err(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            Err("NotFound: missing")  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", [ResultCode.SUCCESS, "Success"])
    def test_success_code_is_reserved(self, code) -> None:
        with pytest.raises(InvalidArgumentError) as exc:
            err(code, "all good")

        assert exc.value.hint is not None
        assert "ok()" in exc.value.hint

    def test_error_info_with_message_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            err(ErrorInfo.not_found("missing"), "again")  # type: ignore[call-overload]

    def test_err_is_immutable(self) -> None:
        outcome = err(ErrorInfo.not_found("missing"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.error = ErrorInfo.conflict("x")  # type: ignore[misc]


class TestMatch:
    def test_ok_invokes_success_handler(self) -> None:
        calls: list[str] = []

        result = ok().match(
            lambda: calls.append("success") or "yes",
            lambda e: calls.append("failure") or "no",
        )

        assert result == "yes"
        assert calls == ["success"]

    def test_err_invokes_failure_handler_with_error(self) -> None:
        info = ErrorInfo.not_found("missing")

        assert err(info).match(lambda: None, lambda e: e) is info

    @pytest.mark.parametrize("outcome", [ok(), err(ResultCode.CONFLICT, "x")])
    def test_missing_handler_is_rejected(self, outcome) -> None:
        with pytest.raises(InvalidArgumentError):
            outcome.match(None, lambda e: e)
        with pytest.raises(InvalidArgumentError):
            outcome.match(lambda: None, None)


class TestConversions:
    def test_ok_with_data_builds_success(self) -> None:
        result = ok().with_data({"id": 1})

        assert isinstance(result, Success)
        assert result.data == {"id": 1}

    def test_err_with_data_keeps_error(self) -> None:
        info = ErrorInfo.internal("db down")
        result = err(info).with_data({"id": 1})

        assert isinstance(result, Failure)
        assert result.error is info
        assert result.data is None

    def test_ok_with_none_data_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ok().with_data(None)


def test_structural_pattern_matching() -> None:
    def label(outcome: Ok | Err) -> str:
        match outcome:
            case Ok():
                return "ok"
            case Err(error):
                return error.code

    assert label(ok()) == "ok"
    assert label(err(ResultCode.NOT_FOUND, "x")) == "NotFound"
