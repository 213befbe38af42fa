import abc

from typing import List, Optional


class TranslatorInvokerI(abc.ABC):
    """
    Remote invocation capability used by the router to run one hop.

    Implementations must return exactly one output batch per input batch, each
    with its items in the input order.  Transport problems are reported with
    :class:`~translation_router_lib.exceptions.TranslatorTransportError`,
    application errors with
    :class:`~translation_router_lib.exceptions.TranslatorApplicationError`.
    """

    @abc.abstractmethod
    def invoke(
        self,
        service: str,
        batches: List[List[str]],
        target_lang: Optional[str] = None,
    ) -> List[List[str]]:
        """
        Translate *batches* with the translator identified by *service*.

        Parameters
        ----------
        service : str
            Translator service identifier (e.g. ``"translator-romance-en"``).
        batches : List[List[str]]
            Ordered batches of texts.
        target_lang : str, optional
            Explicit target language for multi‑language translators.

        Returns
        -------
        List[List[str]]
            Translated batches, same shape as *batches*.
        """
        raise NotImplementedError()
