"""
Utility helpers for representing API errors as JSON‑serializable dictionaries.

This module centralizes the creation of error payloads that can be returned from
Flask endpoints.  By keeping the structure in one place, we avoid repetition and
make it easy to evolve the error format in the future.
"""

from typing import Dict, Any, Optional

# Error code used when a request is missing one or more mandatory parameters.
ERROR_NO_REQUIRED_PARAMS = "No required parameters!"


def error_as_dict(error: str, error_msg: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert an error identifier and optional message into a serialisable dictionary.

    Parameters
    ----------
    error : str
        A short error code or a complete human‑readable error.
    error_msg : Optional[str], default ``None``
        Additional context.  If omitted, only the ``error`` key is included.

    Returns
    -------
    Dict[str, Any]
        ``{"error": ...}`` or ``{"error": ..., "message": ...}``.

    Examples
    --------
    >>> error_as_dict("sourceLang is required")
    {'error': 'sourceLang is required'}

    >>> error_as_dict("No required parameters!", "Missing source")
    {'error': 'No required parameters!', 'message': 'Missing source'}
    """
    if error_msg is None:
        return {"error": error}

    return {"error": error, "message": error_msg}
