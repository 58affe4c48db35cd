# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Lowercase Keys Utility - SessionKit

Recursively lower-cases the keys of a nested mapping, keeping only string
leaves and nested mappings.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


class NormalizedResponse(BaseModel):
    """
    A case-insensitive view of a raw service response.

    Every node keeps its string leaves and its nested nodes in two separate
    tables, so a lower-cased key is either a string or a node, never both.
    """

    strings: dict[str, str] = Field(default_factory=dict)
    nodes: dict[str, "NormalizedResponse"] = Field(default_factory=dict)

    def string(self, key: str) -> str | None:
        """Return the string leaf stored under ``key``, if any."""
        return self.strings.get(key.lower())

    def node(self, key: str) -> "NormalizedResponse | None":
        """Return the nested node stored under ``key``, if any."""
        return self.nodes.get(key.lower())

    def is_empty(self) -> bool:
        return not self.strings and not self.nodes


def lowercase_keys(raw: Mapping[str, Any]) -> NormalizedResponse:
    """
    Recursively lower-case every key of a raw response.

    Mappings are normalized recursively, strings are kept as-is and any other
    value (numbers, booleans, lists, None) is dropped. Keys are visited in
    sorted order of their original spelling so the result does not depend on
    insertion order: when two spellings collide after lower-casing, the one
    that sorts last wins.

    Args:
        raw: The raw response mapping

    Returns:
        The normalized tree
    """
    result = NormalizedResponse()

    keys = sorted(key for key in raw if isinstance(key, str))
    for key in keys:
        value = raw[key]
        lowered = key.lower()
        if isinstance(value, Mapping):
            result.strings.pop(lowered, None)
            result.nodes[lowered] = lowercase_keys(value)
        elif isinstance(value, str):
            result.nodes.pop(lowered, None)
            result.strings[lowered] = value

    return result
