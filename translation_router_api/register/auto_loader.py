from __future__ import annotations

import inspect
import pkgutil
import importlib

from typing import Iterable, Dict, Any, Optional, Type, List, Set

from translation_router_lib.utils.logger import prepare_logger

from translation_router_api.endpoints.endpoint_i import EndpointI


class EndpointAutoLoader:
    """
    Auto-discovery loader for EndpointI subclasses.

    This utility imports a target package (and its subpackages), discovers all
    concrete subclasses of a given base class (EndpointI) and instantiates
    them, passing each constructor only the shared dependencies it accepts.
    """

    def __init__(
        self,
        base_class: Type[EndpointI],
        dependencies: Optional[Dict[str, Any]] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = "DEBUG",
    ):
        """
        Parameters
        ----------
        base_class : Type[EndpointI]
            The common base class used to discover and type-check endpoints.
        dependencies : Dict[str, Any], optional
            Shared objects (orchestrator, warmup fan-out, language graph …)
            offered to endpoint constructors by keyword.
        logger_file_name: str, optional
            Logger file name, also offered to endpoints.
        logger_level: str, optional (default="DEBUG")
            Logger level, also offered to endpoints.
        """
        self.base_class = base_class
        self.logger_file_name = logger_file_name
        self.logger_level = logger_level

        self._dependencies = dict(dependencies or {})
        self._dependencies.setdefault("logger_file_name", logger_file_name)
        self._dependencies.setdefault("logger_level", logger_level)

        self._logger = prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
        )

    def discover_classes_in_package(
        self, package_name: str
    ) -> List[Type[EndpointI]]:
        """
        Import all modules in the provided package and return EndpointI subclasses.

        Only non‑abstract subclasses whose ``__module__`` starts with
        *package_name* are returned, sorted by name for a stable
        registration order.
        """
        pkg = importlib.import_module(package_name)
        discovered: List[Type[EndpointI]] = []

        # Import submodules to ensure classes are registered in __subclasses__()
        for mod_info in pkgutil.walk_packages(pkg.__path__, pkg.__name__ + "."):
            importlib.import_module(mod_info.name)

        def all_subclasses(cls_obj: Type[EndpointI]) -> Set[Type[EndpointI]]:
            subs: Set[Type[EndpointI]] = set()
            for sub in cls_obj.__subclasses__():
                subs.add(sub)
                subs.update(all_subclasses(sub))
            return subs

        for cls in all_subclasses(self.base_class):
            if inspect.isabstract(cls):
                continue
            if cls.__module__.startswith(package_name):
                discovered.append(cls)

        return sorted(discovered, key=lambda c: f"{c.__module__}.{c.__name__}")

    def instantiate_with_defaults(
        self, classes: Iterable[Type[EndpointI]]
    ) -> List[EndpointI]:
        """
        Instantiate provided classes with the matching shared dependencies.

        A class whose constructor still needs an argument that is not
        offered is skipped with a warning.
        """
        instances: List[EndpointI] = []
        for cls in classes:
            kwargs = self._kwargs_for(cls)
            try:
                instances.append(cls(**kwargs))
            except TypeError as e:
                self._logger.warning(
                    f"Cannot instantiate {cls.__name__} with defaults: {str(e)}"
                )
                continue
            self._logger.debug(f"Instantiating {cls.__name__}")
        return instances

    def _kwargs_for(self, cls: Type[EndpointI]) -> Dict[str, Any]:
        params = inspect.signature(cls.__init__).parameters
        return {
            name: value
            for name, value in self._dependencies.items()
            if name in params
        }
