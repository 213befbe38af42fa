"""
Module providing TranslatorsConfig for loading translator services from a JSON file.

Expected layout::

    {
      "active_services": ["translator-de-en", ...],
      "services": {
        "translator-de-en": {
          "api_host": "http://translator-de-en:8000",
          "endpoint": "/translate",
          "api_token": "",
          "timeout": 300
        }
      }
    }
"""

import json
from typing import Dict, List, Iterable

from translation_router_lib.invokers.http_invoker import TranslatorService


class TranslatorsConfig:
    """
    Configuration loader for translator services.

    Attributes
    ----------
    translators_config_path : str
        The provided path, stored for later use.
    active_services : List[str]
        Names listed under ``active_services``.
    services : Dict[str, TranslatorService]
        Description of every active service.
    """

    def __init__(self, translators_config_path: str, default_timeout: int = 300):
        """
        Parameters
        ----------
        translators_config_path : str
            Filesystem path to the JSON configuration file.
        default_timeout : int
            Timeout used for services without their own ``timeout``.

        Raises
        ------
        FileNotFoundError
            If ``translators_config_path`` does not exist.
        json.JSONDecodeError
            If the file content is not valid JSON.
        KeyError
            If an active service has no configuration or no ``api_host``.
        ValueError
            If an active service is listed more than once.
        """
        self.translators_config_path = translators_config_path
        self.default_timeout = default_timeout

        with open(self.translators_config_path, "rt") as f:
            config = json.load(f)

        self.active_services = self._read_active_services(config)
        self.services = self._active_services_configuration(config)

    @staticmethod
    def _read_active_services(config: Dict) -> List[str]:
        active = list(config.get("active_services", []))
        duplicates = sorted({name for name in active if active.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Duplicate active translator services: {', '.join(duplicates)}"
            )
        return active

    def _active_services_configuration(
        self, config: Dict
    ) -> Dict[str, TranslatorService]:
        services_json = config.get("services", {})

        services: Dict[str, TranslatorService] = {}
        for name in self.active_services:
            if name not in services_json:
                raise KeyError(f"Translator service {name} has no configuration!")
            services[name] = TranslatorService.from_config(
                name=name,
                cfg=services_json[name],
                default_timeout=self.default_timeout,
            )
        return services

    def missing_services(self, required: Iterable[str]) -> List[str]:
        """Names from *required* that are not active in this configuration."""
        return sorted(set(required) - set(self.services.keys()))
