"""Single in-flight completion request.

Hides how a request runs in the background: the network call is an asyncio
task on the running loop, and the UI only ever polls it. A callback fires when
the task finishes so the UI knows to poll again.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from .base import CompletionProvider
from .errors import CompletionError
from .models import CompletionResult

# Tasks whose handle was superseded still run to completion
_background_tasks: set[asyncio.Task] = set()


@dataclass(frozen=True)
class CompletionOutcome:
    """Resolved value of a request: exactly one of result or error is set."""

    result: CompletionResult | None = None
    error: CompletionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PendingCompletion:
    """Handle to a completion request, pollable without blocking."""

    def __init__(self, task: "asyncio.Task[CompletionOutcome]") -> None:
        self._task = task

    def done(self) -> bool:
        return self._task.done()

    def poll(self) -> CompletionOutcome | None:
        """Return the outcome, or None while the request is still running.

        Exceptions other than CompletionError escape the task unchanged and
        are re-raised here.
        """
        if not self._task.done():
            return None
        return self._task.result()


async def _run(provider: CompletionProvider, prompt: str) -> CompletionOutcome:
    try:
        result = await provider.complete(prompt)
    except CompletionError as e:
        return CompletionOutcome(error=e)
    return CompletionOutcome(result=result)


def submit_completion(
    provider: CompletionProvider,
    prompt: str,
    on_resolved: Callable[[], None] | None = None,
) -> PendingCompletion:
    """Start a completion request in the background.

    Must be called from inside a running event loop.

    Args:
        provider: Provider that performs the request
        prompt: Text to continue
        on_resolved: Called once the request has resolved, whatever the outcome

    Returns:
        Handle to poll for the outcome
    """
    task = asyncio.get_running_loop().create_task(_run(provider, prompt))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    if on_resolved is not None:
        task.add_done_callback(lambda _task: on_resolved())
    return PendingCompletion(task)
