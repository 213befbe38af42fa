"""
Route resolution over the language graph.

A route is an ordered list of one or two :class:`RouteStep` objects.  The
resolver evaluates, in order:

1. *target* is a hub reached directly from *source* – one hop;
2. *source* is a hub that reaches *target* directly – one hop;
3. a pivot through a hub adjacent to *source*, provided both halves are
   direct edges – two hops;
4. otherwise the pair is unsupported.

There is never more than one intermediate hub.
"""

import logging

from typing import Optional

from translation_router_lib.data_models.route import Route
from translation_router_lib.exceptions import UnsupportedLanguagePairError
from translation_router_lib.core.languages import (
    LanguageGraph,
    DEFAULT_LANGUAGE_GRAPH,
)


class RouteResolver:
    """
    Stateless resolver of ``(source, target)`` pairs into hop lists.

    Parameters
    ----------
    graph : LanguageGraph, optional
        Graph to resolve against; the shared default graph when omitted.
    logger : logging.Logger, optional
        Logger for route decisions.
    """

    def __init__(
        self,
        graph: Optional[LanguageGraph] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.graph = graph or DEFAULT_LANGUAGE_GRAPH
        self.logger = logger or logging.getLogger(__name__)

    def is_valid_pair(self, source: str, target: str) -> bool:
        return self.graph.is_valid_pair(source, target)

    def resolve_route(self, source: str, target: str) -> Optional[Route]:
        """
        Return the hops translating *source* into *target*, or ``None``.

        Parameters
        ----------
        source : str
            Source language code.
        target : str
            Target language code.

        Returns
        -------
        List[RouteStep] | None
            One or two steps; ``None`` when the pair is invalid or no
            decomposition into direct edges exists.
        """
        if not self.graph.is_valid_pair(source, target):
            return None

        # 1. and 2. – one side is a hub directly connected to the other
        if self.graph.is_hub(target) or self.graph.is_hub(source):
            step = self.graph.direct_step(source, target)
            if step is not None:
                self.logger.debug(
                    f"[route] {source}->{target} direct via {step.service}"
                )
                return [step]

        # 3. – pivot through the hub adjacent to the source
        for hub in self.graph.adjacent_hubs(source):
            if hub == target:
                continue
            first = self.graph.direct_step(source, hub)
            second = self.graph.direct_step(hub, target)
            if first is not None and second is not None:
                self.logger.debug(
                    f"[route] {source}->{target} pivot via {hub}: "
                    f"{first.service} -> {second.service}"
                )
                return [first, second]

        # 4.
        self.logger.debug(f"[route] {source}->{target} has no route")
        return None

    def require_route(self, source: str, target: str) -> Route:
        """Like :meth:`resolve_route` but raises when the pair is unsupported."""
        route = self.resolve_route(source, target)
        if route is None:
            raise UnsupportedLanguagePairError(source=source, target=target)
        return route
