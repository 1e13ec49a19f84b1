"""Success/error result containers and the combinators that chain them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Awaitable, Callable, ClassVar, Generic, Iterable, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful stage output."""

    data: T
    success: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    """Failed stage output, carried forward untouched by the combinators."""

    error: str
    details: str | None = None
    original_error: BaseException | None = None
    file_path: str | None = None
    success: ClassVar[bool] = False


Result = Union[Ok[T], Err]


def try_catch(fn: Callable[[], T], error_msg: str) -> Result[T]:
    """Run ``fn`` and wrap its return value, or the exception it raised."""
    try:
        return Ok(fn())
    except Exception as e:
        return Err(error=error_msg, details=str(e), original_error=e)


async def try_catch_async(fn: Callable[[], Awaitable[T]], error_msg: str) -> Result[T]:
    """Async version of :func:`try_catch`."""
    try:
        return Ok(await fn())
    except Exception as e:
        return Err(error=error_msg, details=str(e), original_error=e)


def chain(result: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Apply ``fn`` to the payload of a success; propagate an error unchanged."""
    if isinstance(result, Ok):
        return fn(result.data)
    return result


def chain_pipe(initial: Any, *fns: Callable[[Any], Result[Any]]) -> Result[Any]:
    """Thread ``initial`` through ``fns`` left to right, stopping at the first error.

    Example:
        chain_pipe(files, validate_file_paths_exists, load_yaml_files_from_path)
    """
    return reduce(chain, fns, Ok(initial))


def map_results(items: Iterable[T], transform: Callable[[T], Result[U]]) -> Result[list[U]]:
    """Transform every item, collecting payloads; the first error wins."""
    collected: list[U] = []
    for item in items:
        result = transform(item)
        if not result.success:
            return result
        collected.append(result.data)
    return Ok(collected)


def tap(result: Result[T], side_effect: Callable[[T], Any]) -> Result[T]:
    """Run ``side_effect`` on a success payload and return the result as-is."""
    if isinstance(result, Ok):
        side_effect(result.data)
    return result
