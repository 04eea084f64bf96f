"""Identifier composition for namespaced targets."""

from __future__ import annotations

PROJECT_NAME_DELIMITER = "-"
INCLUDE_DOMAIN_DELIMITER = "/"


def compose_identifier(namespace: str | None, target_name: str, delimiter: str) -> str:
    """Join *namespace* and *target_name* with *delimiter*.

    Examples::

        compose_identifier(None, "widget", "-")   -> "widget"
        compose_identifier("acme", "widget", "-") -> "acme-widget"
        compose_identifier("acme", "widget", "/") -> "acme/widget"
    """
    if namespace is None:
        return target_name
    return f"{namespace}{delimiter}{target_name}"
