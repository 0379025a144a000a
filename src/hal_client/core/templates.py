"""
URI template expansion (RFC 6570) on top of ``uritemplate``.

Values handed to the template engine are stringified here so callers may
pass ints, bools and the like without caring how the engine treats them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx
from uritemplate import URITemplate

from .observability import log_event

log = logging.getLogger("hal_client.templates")


def _template_value(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return {str(k): _template_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_template_value(v) for v in value]
    return str(value)


def collect_parameters(
    parameters: Optional[Mapping[str, Any]], values: Mapping[str, Any]
) -> Dict[str, Any]:
    """Merge a parameter mapping with keyword values; keywords win."""
    merged: Dict[str, Any] = {}
    if parameters is not None:
        if not isinstance(parameters, Mapping):
            raise TypeError(
                f"Template parameters must be a mapping, got {type(parameters).__name__}"
            )
        merged.update(parameters)
    merged.update(values)
    return merged


def expand(template: URITemplate, parameters: Mapping[str, Any]) -> httpx.URL:
    """
    Expand *template* against *parameters* and parse the result.
    The result may be a relative reference.
    """
    variables = {name: _template_value(v) for name, v in parameters.items()}
    expanded = template.expand(variables)
    log_event(
        "template_expanded",
        logger=log,
        template=template.uri,
        count=len(variables),
    )
    return httpx.URL(expanded)


__all__ = ["collect_parameters", "expand"]
