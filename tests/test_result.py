"""Tests for Result containers and combinators."""

import pytest

from resume_manager.utils.result import (
    Err,
    Ok,
    chain,
    chain_pipe,
    map_results,
    tap,
    try_catch,
    try_catch_async,
)


def _boom():
    raise RuntimeError("disk on fire")


class TestContainers:
    def test_success_flags(self):
        assert Ok(1).success is True
        assert Err("nope").success is False

    def test_err_defaults(self):
        err = Err("nope")
        assert err.details is None
        assert err.original_error is None
        assert err.file_path is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).data = 2


class TestTryCatch:
    def test_wraps_return_value(self):
        assert try_catch(lambda: 42, "failed") == Ok(42)

    def test_wraps_exception(self):
        result = try_catch(_boom, "Failed to write")
        assert isinstance(result, Err)
        assert result.error == "Failed to write"
        assert result.details == "disk on fire"
        assert isinstance(result.original_error, RuntimeError)

    @pytest.mark.asyncio
    async def test_async_wraps_return_value(self):
        async def _value():
            return "done"

        assert await try_catch_async(_value, "failed") == Ok("done")

    @pytest.mark.asyncio
    async def test_async_wraps_exception(self):
        async def _fail():
            raise ValueError("bad")

        result = await try_catch_async(_fail, "Failed to render")
        assert isinstance(result, Err)
        assert result.error == "Failed to render"
        assert result.details == "bad"


class TestChain:
    def test_applies_to_success(self):
        assert chain(Ok(2), lambda x: Ok(x * 3)) == Ok(6)

    def test_error_passes_through_untouched(self):
        err = Err("first", details="d", file_path="a.yaml")
        calls = []
        result = chain(err, lambda x: calls.append(x) or Ok(x))
        assert result is err
        assert calls == []

    def test_chain_pipe_threads_values(self):
        result = chain_pipe(1, lambda x: Ok(x + 1), lambda x: Ok(x * 10))
        assert result == Ok(20)

    def test_chain_pipe_stops_at_first_error(self):
        seen = []
        result = chain_pipe(
            1,
            lambda x: Err("stage two failed"),
            lambda x: seen.append(x) or Ok(x),
        )
        assert result == Err("stage two failed")
        assert seen == []

    def test_chain_pipe_without_functions(self):
        assert chain_pipe("value") == Ok("value")


class TestMapResults:
    def test_collects_payloads(self):
        assert map_results([1, 2, 3], lambda x: Ok(x * 2)) == Ok([2, 4, 6])

    def test_first_error_wins(self):
        visited = []

        def transform(x):
            visited.append(x)
            return Err(f"bad {x}") if x >= 2 else Ok(x)

        result = map_results([1, 2, 3], transform)
        assert result == Err("bad 2")
        assert visited == [1, 2]

    def test_empty_input(self):
        assert map_results([], lambda x: Ok(x)) == Ok([])


class TestTap:
    def test_runs_side_effect_on_success(self):
        seen = []
        result = tap(Ok("x"), seen.append)
        assert result == Ok("x")
        assert seen == ["x"]

    def test_skips_side_effect_on_error(self):
        seen = []
        err = Err("nope")
        assert tap(err, seen.append) is err
        assert seen == []
