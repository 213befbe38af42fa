"""
Constants and configuration for the translation‑router service.

All values are loaded from environment variables (prefix
``TRANSLATION_ROUTER_``), allowing the deployment environment to control
behaviour without code changes.  The module groups the settings by purpose
(paths, server, chunking, warmup) and validates the configuration at import
time via the ``_StartAppVerificator`` class.
"""

import os

from translation_router_lib.core.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MAX_ITEMS,
    DEFAULT_CHARS_PER_TOKEN,
    WARMUP_DELAY_SECONDS,
    ChunkingStrategies,
    POSSIBLE_CHUNKING_STRATEGIES,
)
from translation_router_api.base.constants_base import _DontChangeMe, bool_env_value

# Translator services config file
TRANSLATORS_CONFIG_FILE = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}TRANSLATORS_CONFIG",
    "resources/configs/translators-config.json",
).strip()

# Timeout to translator services (one hop)
EXTERNAL_API_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}EXTERNAL_TIMEOUT", 300)
)

# Timeout to translation-router api (gunicorn worker timeout)
TRANSLATION_ROUTER_API_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 0)
)

# Default name of a logging file
REST_API_LOG_FILE_NAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", "translation-router.log"
).strip()

# Default logging level
REST_API_LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Default prefix for each endpoint
DEFAULT_API_PREFIX = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}EP_PREFIX", "/api"
).strip()

# =============================================================================
# SERVER CONFIGURATION
# =============================================================================
# Type of server, default is flask {flask, gunicorn, waitress}
SERVER_TYPE = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_TYPE", "flask")
    .lower()
    .strip()
)
POSSIBLE_SERVER_TYPES = ["flask", "gunicorn", "waitress"]

# Server port, default is 8080
SERVER_PORT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_PORT", "8080").strip()
)

# Number of workers (if server supports multiple workers), default: 2
SERVER_WORKERS_COUNT = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_WORKERS_COUNT", "2"
    ).strip()
)

# Number of threads (if the server supports multithreading), default: 8
SERVER_THREADS_COUNT = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_THREADS_COUNT", "8"
    ).strip()
)

# In some servers like gunicorn is able to set worker class (f.e. gevent)
SERVER_WORKERS_CLASS = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_WORKER_CLASS", ""
).strip()

if not len(SERVER_WORKERS_CLASS):
    SERVER_WORKERS_CLASS = None

# Server host, default is all interfaces
SERVER_HOST = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_HOST", "0.0.0.0"
).strip()

# Run server in debug mode
RUN_IN_DEBUG_MODE = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}IN_DEBUG")
if RUN_IN_DEBUG_MODE:
    REST_API_LOG_LEVEL = "DEBUG"

# =============================================================================
# CHUNKING
# =============================================================================
# Chunking policy {tokens, count}
CHUNKING_STRATEGY = (
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}CHUNKING_STRATEGY", ChunkingStrategies.TOKENS
    )
    .lower()
    .strip()
)

# Token budget of a single chunk (tokens strategy)
MAX_CHUNK_TOKENS = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_CHUNK_TOKENS", DEFAULT_MAX_TOKENS
    )
)

# Number of texts in a single chunk (count strategy)
MAX_CHUNK_ITEMS = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_CHUNK_ITEMS", DEFAULT_MAX_ITEMS)
)

# Characters per token used by the token estimator
CHARS_PER_TOKEN = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}CHARS_PER_TOKEN", DEFAULT_CHARS_PER_TOKEN
    )
)

# Deployment prefix of translator service identifiers (e.g. "acme-")
SERVICE_PREFIX = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVICE_PREFIX", ""
).strip()

# =============================================================================
# WARMUP
# =============================================================================
# Public URL of this router, used to fan out warmup events to siblings
WARMUP_SELF_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_SELF_URL", ""
).strip()

# Interval of the built-in keep-warm scheduler, 0 disables it
WARMUP_INTERVAL_SECONDS = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_INTERVAL_SECONDS", 0)
)

# Number of sibling instances warmed on each scheduled tick
WARMUP_CONCURRENCY = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_CONCURRENCY", 0)
)

# Pause after a warmup fan-out (milliseconds)
WARMUP_DELAY_MS = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_DELAY_MS",
        int(WARMUP_DELAY_SECONDS * 1000),
    )
)


# =============================================================================
# STARTUP VALIDATION
# =============================================================================


class _StartAppVerificator:
    """
    Validate configuration at import time.

    The ``dont_run_if_something_is_wrong`` method raises informative
    exceptions when environment variables contain invalid values.
    """

    @staticmethod
    def __verify_chunking_strategy():
        if CHUNKING_STRATEGY not in POSSIBLE_CHUNKING_STRATEGIES:
            raise Exception(
                f"{CHUNKING_STRATEGY} is not a valid chunking strategy.\n"
                f"Available strategies: {POSSIBLE_CHUNKING_STRATEGIES}\n\n"
            )

    @staticmethod
    def __verify_server_type():
        if SERVER_TYPE not in POSSIBLE_SERVER_TYPES:
            raise Exception(
                f"{SERVER_TYPE} is not a valid server type.\n"
                f"Available types: {POSSIBLE_SERVER_TYPES}\n\n"
            )

    @staticmethod
    def __verify_warmup():
        if WARMUP_CONCURRENCY < 0:
            raise Exception(
                f"{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_CONCURRENCY "
                f"must not be negative\n\n"
            )
        if WARMUP_CONCURRENCY > 0 and not WARMUP_SELF_URL:
            raise Exception(
                f"`{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_SELF_URL` is required "
                f"when `{_DontChangeMe.MAIN_ENV_PREFIX}WARMUP_CONCURRENCY` > 0\n\n"
            )

    def dont_run_if_something_is_wrong(self):
        self.__verify_chunking_strategy()
        self.__verify_server_type()
        self.__verify_warmup()


_StartAppVerificator().dont_run_if_something_is_wrong()
