# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Index and field models returned by index listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Field:
    """
    A single field of an index.

    :param name: Field name.
    :type name: str
    :param key: Whether this field is the document key. The service enforces
        exactly one key field per index.
    :type key: bool
    :param type: EDM type of the field (e.g. ``"Edm.String"``), if returned.
    :type type: str | None
    """

    name: str
    key: bool = False
    type: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Field":
        return cls(name=data.get("name", ""), key=bool(data.get("key", False)), type=data.get("type"))


@dataclass(frozen=True)
class Index:
    """
    Snapshot of an index as returned by a listing. Not cached.

    :param name: Index name, unique within a service.
    :type name: str
    :param fields: Index fields in service order.
    :type fields: list[Field]

    Example::

        for index in client.resources.list_indexes():
            print(index.name, index.key_field.name if index.key_field else None)
    """

    name: str
    fields: List[Field] = field(default_factory=list)

    @property
    def key_field(self) -> Optional[Field]:
        """The field flagged as the document key, or None if none is flagged."""
        for f in self.fields:
            if f.key:
                return f
        return None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Index":
        fields = [Field.from_api_response(f) for f in data.get("fields") or [] if isinstance(f, dict)]
        return cls(name=data.get("name", ""), fields=fields)


__all__ = ["Index", "Field"]
