"""Shared fixtures: a recording translator invoker and a router stack built on it."""

import copy

import pytest

from translation_router_lib.core.chunker import Chunker
from translation_router_lib.core.router import Router
from translation_router_lib.core.route_resolver import RouteResolver
from translation_router_lib.core.orchestrator import RequestOrchestrator
from translation_router_lib.exceptions import TranslatorTransportError
from translation_router_lib.invokers.invoker_interface import TranslatorInvokerI


class FakeInvoker(TranslatorInvokerI):
    """
    Translator stand-in that tags every text with the service it passed.

    ``"hola"`` through ``translator-romance-en`` becomes
    ``"hola>translator-romance-en"``; a hop with a target language also
    appends ``@<lang>``.
    """

    def __init__(self, fail_on=None, error=None):
        self.calls = []
        self.fail_on = set(fail_on or [])
        self.error = error or TranslatorTransportError("connection refused")

    def invoke(self, service, batches, target_lang=None):
        self.calls.append(
            {
                "service": service,
                "batches": copy.deepcopy(batches),
                "target_lang": target_lang,
            }
        )
        if service in self.fail_on:
            raise self.error

        suffix = f">{service}" + (f"@{target_lang}" if target_lang else "")
        return [[f"{text}{suffix}" for text in batch] for batch in batches]

    @property
    def services_called(self):
        return [c["service"] for c in self.calls]


@pytest.fixture
def invoker():
    return FakeInvoker()


@pytest.fixture
def resolver():
    return RouteResolver()


@pytest.fixture
def router(invoker, resolver):
    return Router(invoker=invoker, resolver=resolver)


@pytest.fixture
def orchestrator(router, resolver):
    return RequestOrchestrator(router=router, chunker=Chunker(), resolver=resolver)
