"""
Per-request guard.

The markers live in the ASGI scope's ``state`` mapping, which every layer
and mount point handling one physical request shares. Each parser instance
keeps its own marker there: however many times one parser resolves the
route for a request, its pipeline executes once and later passes replay
its outcome, while a parser of another application mounted along the way
runs its own pipeline.
"""

from typing import Any, MutableMapping, Optional

import anyio

from request_params_parser.models.context import RequestContext

STATE_KEY = "request_params"
CLAIMS_KEY = "request_params_claims"


def context_from_scope(scope: MutableMapping[str, Any]) -> Optional[RequestContext]:
    """Return the context of the innermost parser that claimed the request."""
    state = scope.get("state")
    if state is None:
        return None
    return state.get(STATE_KEY)


class RequestGuard:
    """Single-run guard keyed on the physical request and the parser owning it."""

    def __init__(self, scope: MutableMapping[str, Any], owner: object) -> None:
        self._state: MutableMapping[str, Any] = scope.setdefault("state", {})
        self._owner = owner

    @property
    def context(self) -> Optional[RequestContext]:
        return self._state.get(CLAIMS_KEY, {}).get(id(self._owner))

    def claim(self) -> tuple[RequestContext, bool]:
        """
        Claim the request for the owner's pipeline.

        Returns:
            The owner's context for the request and whether this call
            created it. Only the creating pass may run the pipeline.
        """
        existing = self.context
        if existing is not None:
            return existing, False

        context = RequestContext(completed=anyio.Event())
        self._state.setdefault(CLAIMS_KEY, {})[id(self._owner)] = context
        # Handlers see the context of the application closest to them
        self._state[STATE_KEY] = context
        return context, True

    @staticmethod
    def release(context: RequestContext) -> None:
        """Mark the pipeline as finished for this request."""
        context.executed = True
        if context.completed is not None:
            context.completed.set()

    @staticmethod
    async def wait(context: RequestContext) -> None:
        """Wait until the claiming pass has finished."""
        if context.completed is not None:
            await context.completed.wait()
