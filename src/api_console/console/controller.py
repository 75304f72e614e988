"""Console controller — runs one "try it" action per call.

Each documented endpoint gets its own controller; controllers share no state.
"""

import logging
from collections.abc import Callable, Iterable

from api_console.console.assembler import assemble
from api_console.console.models import Idle, OutcomeView, ParameterEntry, Pending
from api_console.console.normalizer import normalize, normalize_error
from api_console.console.reader import read_descriptors
from api_console.console.transport import TransportInvoker
from api_console.docs.base import EndpointSpec
from api_console.errors import ConsoleError

logger = logging.getLogger(__name__)


class ConsoleController:
    """Tracks the outcome shown for one endpoint.

    Only the latest invocation may set the outcome; a result arriving for an
    older invocation is dropped.
    """

    def __init__(
        self,
        spec: EndpointSpec,
        invoker: TransportInvoker,
        render: Callable[[OutcomeView], None] | None = None,
    ):
        self.spec = spec
        self.invoker = invoker
        self.outcome: OutcomeView = Idle()
        self._render = render
        self._seq = 0

    async def try_it(self, entries: Iterable[ParameterEntry]) -> OutcomeView | None:
        """Send a request built from the entries and record the outcome.

        Returns the applied outcome, or None if a newer invocation started
        while this one was waiting.
        """
        self._seq += 1
        seq = self._seq
        self._show(Pending())

        try:
            request = assemble(self.spec, read_descriptors(entries))
            response = await self.invoker.invoke(request)
        except ConsoleError as e:
            outcome = normalize_error(e)
        else:
            outcome = normalize(response)

        if seq != self._seq:
            logger.debug("Discarding stale result of invocation %d (latest is %d)", seq, self._seq)
            return None
        self._show(outcome)
        return outcome

    def _show(self, outcome: OutcomeView) -> None:
        self.outcome = outcome
        if self._render is not None:
            self._render(outcome)
