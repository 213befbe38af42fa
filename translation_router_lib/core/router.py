"""
Sequential execution of translation routes.

Each hop receives the batches produced by the previous hop, so hops always run
one after another.  The first failing hop aborts the whole request; nothing is
retried and no partial result is returned.
"""

import logging

from typing import List, Optional

from translation_router_lib.data_models.route import Route
from translation_router_lib.core.route_resolver import RouteResolver
from translation_router_lib.invokers.invoker_interface import TranslatorInvokerI
from translation_router_lib.exceptions import HopExecutionError


class Router:
    """
    Run route hops against a remote invocation capability.

    Parameters
    ----------
    invoker : TranslatorInvokerI
        Capability that performs a single hop.
    resolver : RouteResolver, optional
        Resolver used by :meth:`translate_batches`; default graph when omitted.
    logger : logging.Logger, optional
        Logger for hop diagnostics.
    """

    def __init__(
        self,
        invoker: TranslatorInvokerI,
        resolver: Optional[RouteResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.invoker = invoker
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = resolver or RouteResolver(logger=self.logger)

    def execute(self, route: Route, batches: List[List[str]]) -> List[List[str]]:
        """
        Apply every hop of *route* to *batches* in order.

        Raises
        ------
        HopExecutionError
            When a hop fails; identifies the 1‑based step and its service.
        """
        current = batches
        for step_no, step in enumerate(route, start=1):
            try:
                current = self.invoker.invoke(
                    step.service, current, target_lang=step.target_lang
                )
            except Exception as exc:
                self.logger.error(
                    f"[router] step {step_no} ({step.service}) failed: {exc}"
                )
                raise HopExecutionError(
                    step=step_no, service=step.service, cause=exc
                ) from exc
            self.logger.debug(
                f"[router] step {step_no} ({step.service}) "
                f"returned {len(current)} chunks"
            )
        return current

    def translate_batches(
        self, source: str, target: str, batches: List[List[str]]
    ) -> List[List[str]]:
        """
        Resolve the route for ``source -> target`` and execute it.

        Empty input returns ``[]`` without resolving or calling anything.

        Raises
        ------
        UnsupportedLanguagePairError
            When no route exists.
        HopExecutionError
            When a hop fails.
        """
        if not batches:
            return []

        route = self.resolver.require_route(source, target)
        return self.execute(route, batches)

    def translate(self, source: str, target: str, texts: List[str]) -> List[str]:
        """Translate a single batch of *texts* without chunking."""
        if not texts:
            return []

        results = self.translate_batches(source, target, [list(texts)])
        if not results:
            return []
        return results[0]
