from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RouteStep:
    """
    One hop of a translation route.

    Attributes
    ----------
    service : str
        Identifier of the translator service to call.
    target_lang : str | None
        Explicit target language sent with the hop; only set when the hop
        lands on a family with more than one language (``en`` → romance).
    """

    service: str
    target_lang: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {"service": self.service, "target_lang": self.target_lang}


Route = List[RouteStep]
