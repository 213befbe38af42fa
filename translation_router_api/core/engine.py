"""
translation_router_api.core.engine
==================================

This module provides the :class:`FlaskEngine` class, which builds and
configures a Flask application for the translation‑router REST API.  The
engine assembles the routing core (language graph, route resolver, router,
chunker and request orchestrator), the warmup fan‑out, and then
automatically discovers concrete implementations of
:class:`~translation_router_api.endpoints.endpoint_i.EndpointI` and registers
them under :data:`~translation_router_api.base.constants.DEFAULT_API_PREFIX`.

Typical usage
-------------
>>> engine = FlaskEngine(
...     translators_config_path="resources/configs/translators-config.json"
... )
>>> app = engine.prepare_flask_app()
>>> app.run()
"""

from flask import Flask
from typing import Any, Callable, Dict, List, Type, Optional

from translation_router_lib.utils.logger import prepare_logger
from translation_router_lib.core.chunker import Chunker
from translation_router_lib.core.router import Router
from translation_router_lib.core.languages import LanguageGraph
from translation_router_lib.core.route_resolver import RouteResolver
from translation_router_lib.core.orchestrator import RequestOrchestrator
from translation_router_lib.core.warmup import (
    HttpSelfInvoker,
    WarmupFanout,
    WarmupScheduler,
)
from translation_router_lib.invokers.invoker_interface import TranslatorInvokerI
from translation_router_lib.invokers.http_invoker import HttpTranslatorInvoker

from translation_router_api.endpoints.endpoint_i import EndpointI
from translation_router_api.core.translators_config import TranslatorsConfig
from translation_router_api.register.auto_loader import EndpointAutoLoader
from translation_router_api.register.register import FlaskEndpointRegistrar
from translation_router_api.base.constants import (
    DEFAULT_API_PREFIX,
    REST_API_LOG_LEVEL,
    EXTERNAL_API_TIMEOUT,
    CHUNKING_STRATEGY,
    MAX_CHUNK_TOKENS,
    MAX_CHUNK_ITEMS,
    CHARS_PER_TOKEN,
    SERVICE_PREFIX,
    WARMUP_SELF_URL,
    WARMUP_INTERVAL_SECONDS,
    WARMUP_CONCURRENCY,
    WARMUP_DELAY_MS,
)


class FlaskEngine:
    """
    Engine responsible for creating a Flask application that automatically
    discovers, loads, and registers translation‑router REST endpoints.

    Parameters
    ----------
    translators_config_path : str, optional
        Path to the JSON file describing translator services.  Required
        unless *invoker* is given.
    logger_file_name : Optional[str], optional
        File name for the engine's logger output.
    logger_level : Optional[str], optional
        Logging level; defaults to
        :data:`~translation_router_api.base.constants.REST_API_LOG_LEVEL`.
    invoker : TranslatorInvokerI, optional
        Remote invocation capability.  When omitted an
        :class:`HttpTranslatorInvoker` is built from the translators config.
    self_invoker : Callable[[dict], None], optional
        Dispatcher of child warmup events.  When omitted and
        ``WARMUP_SELF_URL`` is set, an :class:`HttpSelfInvoker` is used.
    service_prefix : str, optional
        Deployment prefix of service identifiers; defaults to
        ``SERVICE_PREFIX``.
    chunking_strategy : str, optional
        ``tokens`` or ``count``; defaults to ``CHUNKING_STRATEGY``.
    warmup_delay_seconds : float, optional
        Pause after a warmup fan‑out; defaults to ``WARMUP_DELAY_MS / 1000``.
    start_warmup_scheduler : bool
        Start the keep‑warm scheduler when ``WARMUP_INTERVAL_SECONDS > 0``.

    Notes
    -----
    The engine does not start the HTTP server; it only prepares the
    application instance.

    Raises
    ------
    RuntimeError
        When the language graph routes through a service that is not active
        in the translators configuration.
    """

    def __init__(
        self,
        translators_config_path: Optional[str] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        invoker: Optional[TranslatorInvokerI] = None,
        self_invoker: Optional[Callable[[Dict[str, Any]], None]] = None,
        service_prefix: Optional[str] = None,
        chunking_strategy: Optional[str] = None,
        warmup_delay_seconds: Optional[float] = None,
        start_warmup_scheduler: bool = True,
    ) -> None:
        if invoker is None and not translators_config_path:
            raise ValueError("Either `translators_config_path` or `invoker` is required")

        self.translators_config_path = translators_config_path
        self.logger_level = logger_level
        self.logger_file_name = logger_file_name

        self.logger = prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
            use_default_config=True,
        )

        self.language_graph = LanguageGraph(
            service_prefix=SERVICE_PREFIX if service_prefix is None else service_prefix
        )
        self.invoker = invoker or self.__prepare_http_invoker()

        self.resolver = RouteResolver(graph=self.language_graph, logger=self.logger)
        self.router = Router(
            invoker=self.invoker, resolver=self.resolver, logger=self.logger
        )
        self.chunker = Chunker(
            strategy=chunking_strategy or CHUNKING_STRATEGY,
            max_tokens=MAX_CHUNK_TOKENS,
            max_items=MAX_CHUNK_ITEMS,
            chars_per_token=CHARS_PER_TOKEN,
            logger=self.logger,
        )
        self.orchestrator = RequestOrchestrator(
            router=self.router,
            chunker=self.chunker,
            resolver=self.resolver,
            logger=self.logger,
        )

        if self_invoker is None and WARMUP_SELF_URL:
            self_invoker = HttpSelfInvoker(
                self_url=WARMUP_SELF_URL,
                endpoint=f"{DEFAULT_API_PREFIX.rstrip('/')}/warmup",
                logger=self.logger,
            )
        self.warmup_fanout = WarmupFanout(
            invoke_self=self_invoker,
            delay_seconds=(
                WARMUP_DELAY_MS / 1000.0
                if warmup_delay_seconds is None
                else warmup_delay_seconds
            ),
            logger=self.logger,
        )

        self.warmup_scheduler = None
        if start_warmup_scheduler and WARMUP_INTERVAL_SECONDS > 0:
            self.warmup_scheduler = WarmupScheduler(
                fanout=self.warmup_fanout,
                interval_seconds=WARMUP_INTERVAL_SECONDS,
                concurrency=WARMUP_CONCURRENCY,
                logger=self.logger,
            )

    def prepare_flask_app(self) -> Flask:
        """
        Create and configure the Flask application.

        Returns
        -------
        Flask
            A Flask instance with all discovered endpoints registered.

        Raises
        ------
        RuntimeError
            If endpoint registration fails for any reason.
        """
        flask_app = Flask(__name__)
        try:
            self.__register_instances(
                application=flask_app,
                instances=self.__auto_load_endpoints(base_class=EndpointI),
            )
        except RuntimeError as e:
            raise RuntimeError(f"Failed to register endpoints: {e}")

        if self.warmup_scheduler is not None:
            self.warmup_scheduler.start()

        return flask_app

    def __prepare_http_invoker(self) -> HttpTranslatorInvoker:
        """
        Build the HTTP invoker from the translators config.

        Every service the language graph can route through must be active.
        """
        config = TranslatorsConfig(
            translators_config_path=self.translators_config_path,
            default_timeout=EXTERNAL_API_TIMEOUT,
        )
        missing = config.missing_services(self.language_graph.services())
        if missing:
            raise RuntimeError(
                f"Translator services are not configured: {', '.join(missing)}"
            )

        self.logger.info(f"Active translator services: {config.active_services}")
        return HttpTranslatorInvoker(services=config.services, logger=self.logger)

    def __shared_dependencies(self) -> Dict[str, Any]:
        return {
            "orchestrator": self.orchestrator,
            "warmup_fanout": self.warmup_fanout,
            "language_graph": self.language_graph,
        }

    def __auto_load_endpoints(self, base_class: Type[EndpointI]) -> List[EndpointI]:
        """
        Discover and instantiate all concrete ``EndpointI`` subclasses
        found in the ``translation_router_api.endpoints`` package.

        Raises
        ------
        RuntimeError
            If no endpoint classes are discovered or instantiated.
        """
        _auto_loader = EndpointAutoLoader(
            base_class=base_class,
            dependencies=self.__shared_dependencies(),
            logger_file_name=self.logger_file_name,
            logger_level=self.logger_level,
        )

        classes = _auto_loader.discover_classes_in_package(
            "translation_router_api.endpoints"
        )

        instances = _auto_loader.instantiate_with_defaults(classes=classes)
        if instances is None or not len(instances):
            raise RuntimeError("No endpoints found!")

        return instances

    @staticmethod
    def __register_instances(application, instances: List[EndpointI]):
        with FlaskEndpointRegistrar(
            app=application, url_prefix=DEFAULT_API_PREFIX
        ) as registrar:
            registrar.register_endpoints(endpoints=instances)
