# tests/unit/test_exceptions.py
from __future__ import annotations

import traceback
from types import SimpleNamespace

import pytest

from errorchain import BaseError, MultiError, from_exception


def raised(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as e:
        return e


class TestCode:

    def test_code_defaults_to_name(self):
        err = BaseError("boom")
        assert err.code == err.name == "SystemError"

    def test_code_follows_name_changes(self):
        err = BaseError("boom")
        err.name = "CustomError"
        assert err.code == "CustomError"

    def test_explicit_code_wins(self):
        err = BaseError("boom")
        err.code = "E_BOOM"
        assert err.code == "E_BOOM"
        assert err.name == "SystemError"

    def test_clearing_code_restores_default(self):
        err = BaseError("boom")
        err.code = "E_BOOM"
        err.code = None
        assert err.code == "SystemError"


class TestSet:

    def test_set_skips_name_and_stack(self):
        err = BaseError("boom")
        result = err.set({"name": "X", "stack": "Y", "code": "E1", "target": "load"})

        assert result is err
        assert err.name == "SystemError"
        assert err.stack is None
        assert err.code == "E1"
        assert err.target == "load"

    def test_set_ignores_unknown_keys(self):
        err = BaseError("boom").set(bogus=1, message="other")
        assert not hasattr(err, "bogus")
        assert err.message == "boom"

    def test_set_accepts_mapping_and_kwargs(self):
        err = BaseError("boom").set({"target": "a"}, link="https://example.com/errors/boom")
        assert err.target == "a"
        assert err.link == "https://example.com/errors/boom"

    def test_inner_error_is_not_settable(self):
        inner = BaseError("inner")
        err = BaseError("outer", inner)
        err.set(inner_error=BaseError("other"), _inner_error=None)
        assert err.inner_error is inner

        with pytest.raises(AttributeError):
            err.inner_error = BaseError("other")


class TestStack:

    def test_stack_trace_keeps_frame_lines_only(self):
        err = BaseError("boom")
        err.stack = "Error: boom\n    at a (f.js:1:1)\n  not a frame\n\tat b (g.js:2:2)  "
        assert err.stack_trace == ["at a (f.js:1:1)", "at b (g.js:2:2)"]

    def test_stack_none_gives_empty_trace(self):
        err = BaseError("boom")
        err.stack = "Error\n at x"
        assert err.stack_trace == ["at x"]
        err.stack = None
        assert err.stack_trace == []

    def test_setting_stack_invalidates_cache(self):
        err = BaseError("boom")
        err.stack = "at first"
        assert err.stack_trace == ["at first"]
        err.stack = "at second"
        assert err.stack_trace == ["at second"]

    def test_setting_stack_trace_rewrites_stack(self):
        err = BaseError("boom")
        err.stack_trace = ["a", "b"]
        assert err.stack == "a\nb"
        assert err.stack_trace == ["a", "b"]

    def test_unraised_error_has_no_stack(self):
        err = BaseError("boom")
        assert err.stack is None
        assert err.stack_trace == []

    def test_raised_error_derives_stack_from_traceback(self):
        err = raised(BaseError("boom"))
        assert err.stack.startswith("Traceback (most recent call last):")
        assert err.stack_trace
        assert all(line.startswith('File "') for line in err.stack_trace)

    def test_assigned_stack_overrides_traceback(self):
        err = raised(BaseError("boom"))
        err.stack = None
        assert err.stack is None
        assert err.stack_trace == []


class TestCause:

    def test_no_cause(self):
        err = BaseError("boom")
        assert err.inner_error is None
        assert err.cause is None

    def test_base_error_cause_is_used_directly(self):
        inner = BaseError("inner")
        err = BaseError("outer", inner)
        assert err.inner_error is inner
        assert err.__cause__ is inner

    def test_foreign_cause_is_wrapped(self):
        foreign = raised(ValueError("bad value"))
        err = BaseError("outer", foreign)

        assert type(err.inner_error) is BaseError
        assert err.inner_error.message == "bad value"
        assert err.inner_error.stack == foreign_stack(foreign)
        assert err.cause is foreign
        assert err.__cause__ is foreign

    def test_foreign_cause_of_cause_is_not_followed(self):
        try:
            try:
                raise KeyError("k")
            except KeyError as e:
                raise ValueError("v") from e
        except ValueError as e:
            foreign = e

        err = BaseError("outer", foreign)
        assert err.inner_error.message == "v"
        assert err.inner_error.inner_error is None

    def test_non_error_cause_is_kept_but_not_chained(self):
        err = BaseError("outer", "just text")
        assert err.inner_error is None
        assert err.cause == "just text"

    def test_duck_typed_cause(self):
        foreign = SimpleNamespace(message="js boom", stack="Error: js boom\n    at main (app.js:3:7)")
        err = BaseError("outer", foreign)
        assert err.inner_error.message == "js boom"
        assert err.inner_error.stack_trace == ["at main (app.js:3:7)"]


def foreign_stack(error: BaseException) -> str:
    return "".join(traceback.format_exception(type(error), error, error.__traceback__, chain=False))


class TestFromException:

    def test_plain_error(self):
        foreign = raised(RuntimeError("boom"))
        converted = from_exception(foreign)

        assert isinstance(converted, BaseError)
        assert converted.message == "boom"
        assert converted.stack == foreign_stack(foreign)

    def test_unraised_error_has_no_stack(self):
        converted = from_exception(RuntimeError("boom"))
        assert converted.message == "boom"
        assert converted.stack is None

    def test_base_error_passes_through(self):
        err = BaseError("boom")
        assert from_exception(err) is err

    def test_exception_group_becomes_multi_error(self):
        group = ExceptionGroup("many", [ValueError("a"), TypeError("b")])
        converted = from_exception(group)

        assert isinstance(converted, MultiError)
        assert converted.message == "many"
        assert [e.message for e in converted.errors] == ["a", "b"]


class TestMultiError:

    def test_defaults(self):
        err = MultiError()
        assert err.message == "One or more errors occurred."
        assert err.errors == []
        assert err.name == "AggregateError"
        assert err.code == "AggregateError"

    def test_errors_keep_order_and_convert_foreign(self):
        a = BaseError("a")
        err = MultiError("many", [a, ValueError("b")])
        assert err.errors[0] is a
        assert type(err.errors[1]) is BaseError
        assert err.errors[1].message == "b"

    def test_errors_are_settable(self):
        a = BaseError("a")
        err = MultiError().set(errors=[a])
        assert err.errors == [a]

    def test_set_errors_converts_foreign_entries(self):
        err = MultiError().set(errors=[ValueError("x")])

        assert isinstance(err.errors[0], BaseError)
        assert err.errors[0].message == "x"
        assert err.to_dict()["details"] == [{"message": "x", "code": "SystemError", "target": None}]

    def test_set_errors_none_clears_list(self):
        err = MultiError("many", [BaseError("a")]).set(errors=None)

        assert err.errors == []
        assert err.to_dict()["details"] == []

    def test_assigning_errors_converts_entries(self):
        err = MultiError()
        err.errors = (TypeError("t"),)
        assert [type(e) for e in err.errors] == [BaseError]

    def test_from_foreign_uses_aggregate_cause(self):
        try:
            try:
                raise OSError("disk full")
            except OSError as e:
                raise ExceptionGroup("writes failed", [ValueError("x")]) from e
        except ExceptionGroup as e:
            group = e

        err = MultiError.from_foreign(group)
        assert err.inner_error.message == "disk full"
        assert [e.message for e in err.errors] == ["x"]
        assert err.stack == foreign_stack(group)

    def test_from_foreign_without_cause_falls_back_to_itself(self):
        group = ExceptionGroup("writes failed", [ValueError("x"), ValueError("y")])
        err = MultiError.from_foreign(group)

        fallback = err.inner_error
        assert fallback is not err
        assert type(fallback) is BaseError
        assert fallback.message == "writes failed"
        assert fallback.inner_error is None

    def test_from_foreign_duck_typed_aggregate(self):
        foreign = SimpleNamespace(
            message="agg",
            errors=[SimpleNamespace(message="one"), SimpleNamespace(message="two")],
            cause=SimpleNamespace(message="root"),
        )
        err = BaseError("outer", foreign)

        assert isinstance(err.inner_error, MultiError)
        assert [e.message for e in err.inner_error.errors] == ["one", "two"]
        assert err.inner_error.inner_error.message == "root"

    def test_nested_exception_groups(self):
        group = ExceptionGroup("outer", [ExceptionGroup("inner", [ValueError("leaf")])])
        err = MultiError.from_foreign(group)

        child = err.errors[0]
        assert isinstance(child, MultiError)
        assert child.errors[0].message == "leaf"


class TestToDict:

    def test_plain_error(self):
        err = BaseError("boom").set(target="load")
        err.stack = "at x"
        err.link = "https://example.com"

        assert err.to_dict() == {"message": "boom", "code": "SystemError", "target": "load"}

    def test_inner_error_is_nested(self):
        err = BaseError("outer", BaseError("inner").set(code="E_INNER"))
        assert err.to_dict() == {
            "message": "outer",
            "code": "SystemError",
            "target": None,
            "innerError": {"message": "inner", "code": "E_INNER", "target": None},
        }

    def test_multi_error_details_in_order(self):
        err = MultiError("many", [BaseError("a"), BaseError("b")])
        data = err.to_dict()

        assert [d["message"] for d in data["details"]] == ["a", "b"]
        assert data["code"] == "AggregateError"
        assert "name" not in data
        assert "stack" not in data
