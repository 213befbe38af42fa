"""
Static language graph used for routing.

Every supported language belongs to a *family*.  Two families are single
*hub* languages (``en`` and ``de``); the ``romance`` family groups all the
languages served by the romance translators.  Direct edges exist only
between families listed in :data:`SERVICE_EDGES`, each backed by one
translator service:

    romance  ->  en      translator-romance-en
    en       ->  romance translator-en-romance  (needs target_lang)
    de       ->  en      translator-de-en
    en       ->  de      translator-en-de

The graph is immutable; :data:`DEFAULT_LANGUAGE_GRAPH` is built once at
import time and shared.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Iterable

from translation_router_lib.data_models.route import RouteStep
from translation_router_lib.core.constants import (
    Families,
    HUB_LANGUAGES,
    SERVICE_EDGES,
    ROMANCE_LANGUAGES,
)


def _default_families() -> Dict[str, str]:
    families = {lang: Families.ROMANCE for lang in ROMANCE_LANGUAGES}
    families["en"] = Families.EN
    families["de"] = Families.DE
    return families


class LanguageGraph:
    """
    Immutable membership and edge data for the supported languages.

    Parameters
    ----------
    families : Mapping[str, str], optional
        Language code -> family name.  Defaults to the romance family plus the
        ``en`` and ``de`` hubs.
    edges : Mapping[Tuple[str, str], str], optional
        ``(from_family, to_family)`` -> service identifier.
    hubs : Iterable[str], optional
        Hub languages in pivot‑preference order.
    service_prefix : str
        Deployment prefix prepended to every service identifier
        (e.g. ``"acme-"`` gives ``"acme-translator-de-en"``).
    """

    def __init__(
        self,
        families: Optional[Mapping[str, str]] = None,
        edges: Optional[Mapping[Tuple[str, str], str]] = None,
        hubs: Optional[Iterable[str]] = None,
        service_prefix: str = "",
    ):
        self._families = MappingProxyType(dict(families or _default_families()))
        self._edges = MappingProxyType(dict(edges or SERVICE_EDGES))
        self._hubs = tuple(hubs or HUB_LANGUAGES)
        self._service_prefix = service_prefix or ""

        unknown_hubs = [h for h in self._hubs if h not in self._families]
        if unknown_hubs:
            raise ValueError(f"Hub language(s) {unknown_hubs} are not in the graph")

        family_sizes: Dict[str, int] = {}
        for family in self._families.values():
            family_sizes[family] = family_sizes.get(family, 0) + 1
        self._family_sizes = MappingProxyType(family_sizes)

    @property
    def hubs(self) -> Tuple[str, ...]:
        return self._hubs

    @property
    def service_prefix(self) -> str:
        return self._service_prefix

    def is_supported(self, lang: str) -> bool:
        return lang in self._families

    def is_hub(self, lang: str) -> bool:
        return lang in self._hubs

    def family_of(self, lang: str) -> Optional[str]:
        return self._families.get(lang)

    def is_valid_pair(self, source: str, target: str) -> bool:
        """Both languages are known and they are not the same code."""
        return (
            self.is_supported(source)
            and self.is_supported(target)
            and source != target
        )

    def supported_languages(self) -> List[str]:
        return sorted(self._families.keys())

    def services(self) -> List[str]:
        """All service identifiers (with prefix) the graph can route to."""
        return sorted(self._service_prefix + s for s in self._edges.values())

    def direct_step(self, source: str, target: str) -> Optional[RouteStep]:
        """
        Return the one‑hop step from *source* to *target*, or ``None``.

        A direct step requires an edge between the two families and at least
        one hub endpoint, so two leaves are never connected directly.  The step
        carries ``target_lang`` only when the destination family holds more
        than one language.
        """
        if not self.is_valid_pair(source, target):
            return None
        if not (self.is_hub(source) or self.is_hub(target)):
            return None

        src_family = self._families[source]
        tgt_family = self._families[target]
        service = self._edges.get((src_family, tgt_family))
        if service is None:
            return None

        target_lang = target if self._family_sizes[tgt_family] > 1 else None
        return RouteStep(
            service=self._service_prefix + service, target_lang=target_lang
        )

    def adjacent_hubs(self, source: str) -> List[str]:
        """Hubs reachable from *source* in one hop, in preference order."""
        return [
            hub
            for hub in self._hubs
            if hub != source and self.direct_step(source, hub) is not None
        ]


DEFAULT_LANGUAGE_GRAPH = LanguageGraph()


def get_supported_languages() -> List[str]:
    """Sorted list of every language code of the default graph."""
    return DEFAULT_LANGUAGE_GRAPH.supported_languages()
