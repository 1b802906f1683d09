from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Literal, Optional, Union

# Raw event payload as framed from the byte stream
Payload = bytes

# Callbacks may be plain functions or coroutine functions
PayloadCallback = Callable[[Payload], Union[None, Awaitable[None]]]
RecordHandler = Callable[[Any], Union[None, Awaitable[None]]]

StreamOutcome = Literal["completed", "cancelled", "failed"]


async def invoke_callback(callback: Callable[..., Any], *args: Any) -> Optional[Any]:
    """Call ``callback`` and await the result if it returned an awaitable."""
    result = callback(*args)
    if inspect.isawaitable(result):
        return await result
    return result
