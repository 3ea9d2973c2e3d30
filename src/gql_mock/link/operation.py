"""Link – Operation value object."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from graphql import DocumentNode, get_operation_ast

from gql_mock.documents import ensure_document


@dataclasses.dataclass(frozen=True)
class Operation:
    """A query document plus the variables submitted with it."""

    query: DocumentNode
    variables: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    operation_name: str | None = None
    context: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def create(
        cls,
        document: DocumentNode | str,
        variables: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Operation:
        query = ensure_document(document)
        if operation_name is None:
            operation = get_operation_ast(query)
            if operation is not None and operation.name is not None:
                operation_name = operation.name.value
        return cls(
            query=query,
            variables=MappingProxyType(dict(variables or {})),
            operation_name=operation_name,
            context=dict(context or {}),
        )


__all__ = ["Operation"]
