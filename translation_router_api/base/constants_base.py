import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "TRANSLATION_ROUTER_"


def bool_env_value(env_name: str, default: bool = False) -> bool:
    """
    Read a boolean environment variable.

    ``1``, ``true``, ``yes``, ``t`` and ``y`` (any case) are true; an unset or
    empty variable gives *default*.
    """
    value = os.environ.get(env_name, "").strip().lower()
    if not value:
        return default
    return value in ("1", "true", "yes", "t", "y")
