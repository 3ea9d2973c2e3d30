"""Documents – node-removal transforms over GraphQL ASTs.

Every transform returns a new tree (the input is never mutated) or ``None``
when no operation definition survives the removal.  Selection sets emptied
by a removal collapse upwards: the owning field, inline fragment, fragment
definition or operation is dropped too, and spreads of dropped fragments are
removed until the document stops changing.  Fragment definitions no longer
reachable from any operation after a removal are dropped as well.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from graphql import (
    DirectiveNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)
from graphql.language import REMOVE, Visitor, visit

FieldPredicate = Callable[[FieldNode], bool]
FragmentPredicate = Callable[[InlineFragmentNode | FragmentSpreadNode], bool]
DirectivePredicate = Callable[[DirectiveNode], bool]

TYPENAME_FIELD = "__typename"


@dataclasses.dataclass(frozen=True)
class DirectiveRemoval:
    """Describes which directives to strip.

    Args:
        name: Directive name to match (without ``@``).
        test: Arbitrary predicate over directive nodes; matched in addition
            to *name*.
        remove_field: Drop the whole field, inline fragment or fragment
            spread carrying the directive instead of only the directive.
    """

    name: str | None = None
    test: DirectivePredicate | None = None
    remove_field: bool = False

    def matches(self, directive: DirectiveNode) -> bool:
        if self.name is not None and directive.name.value == self.name:
            return True
        return self.test is not None and self.test(directive)


def _never(_node: Any) -> bool:
    return False


def _is_empty(selection_set: SelectionSetNode | None) -> bool:
    return selection_set is not None and not selection_set.selections


class _NodeRemover(Visitor):
    def __init__(
        self,
        field_test: FieldPredicate,
        directive_test: DirectivePredicate,
        fragment_test: FragmentPredicate,
        removed_fragments: frozenset[str],
    ) -> None:
        super().__init__()
        self._field_test = field_test
        self._directive_test = directive_test
        self._fragment_test = fragment_test
        self._removed_fragments = removed_fragments
        self.emptied_fragments: set[str] = set()

    def enter_field(self, node: FieldNode, *_args: Any) -> Any:
        if self._field_test(node):
            return REMOVE
        return None

    def enter_directive(self, node: DirectiveNode, *_args: Any) -> Any:
        if self._directive_test(node):
            return REMOVE
        return None

    def enter_inline_fragment(self, node: InlineFragmentNode, *_args: Any) -> Any:
        if self._fragment_test(node):
            return REMOVE
        return None

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args: Any) -> Any:
        if node.name.value in self._removed_fragments or self._fragment_test(node):
            return REMOVE
        return None

    def leave_field(self, node: FieldNode, *_args: Any) -> Any:
        return REMOVE if _is_empty(node.selection_set) else None

    def leave_inline_fragment(self, node: InlineFragmentNode, *_args: Any) -> Any:
        return REMOVE if _is_empty(node.selection_set) else None

    def leave_fragment_definition(self, node: FragmentDefinitionNode, *_args: Any) -> Any:
        if _is_empty(node.selection_set):
            self.emptied_fragments.add(node.name.value)
            return REMOVE
        return None

    def leave_operation_definition(self, node: OperationDefinitionNode, *_args: Any) -> Any:
        return REMOVE if _is_empty(node.selection_set) else None


class _SpreadCollector(Visitor):
    def __init__(self) -> None:
        super().__init__()
        self.names: set[str] = set()

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args: Any) -> Any:
        self.names.add(node.name.value)
        return None


def _reachable_fragments(document: DocumentNode) -> set[str]:
    fragments = {
        d.name.value: d for d in document.definitions if isinstance(d, FragmentDefinitionNode)
    }
    pending: list[Any] = [
        d for d in document.definitions if isinstance(d, OperationDefinitionNode)
    ]
    reachable: set[str] = set()
    while pending:
        collector = _SpreadCollector()
        visit(pending.pop(), collector)
        for name in collector.names - reachable:
            reachable.add(name)
            if name in fragments:
                pending.append(fragments[name])
    return reachable


def _remove(
    document: DocumentNode,
    field_test: FieldPredicate,
    directive_test: DirectivePredicate,
    fragment_test: FragmentPredicate = _never,
) -> DocumentNode | None:
    removed: frozenset[str] = frozenset()
    current = document
    while True:
        remover = _NodeRemover(field_test, directive_test, fragment_test, removed)
        current = visit(current, remover)
        if remover.emptied_fragments <= removed:
            break
        removed = removed | remover.emptied_fragments

    if not any(isinstance(d, OperationDefinitionNode) for d in current.definitions):
        return None

    # fragments whose every spread was removed go with them
    orphaned = _reachable_fragments(document) - _reachable_fragments(current)
    if orphaned:
        current = DocumentNode(
            definitions=tuple(
                d
                for d in current.definitions
                if not (isinstance(d, FragmentDefinitionNode) and d.name.value in orphaned)
            ),
            loc=current.loc,
        )
    return current


def remove_directive_nodes(
    document: DocumentNode, *configs: DirectiveRemoval
) -> DocumentNode | None:
    """Strip the directives described by *configs* from *document*."""

    def selection_test(node: FieldNode | InlineFragmentNode | FragmentSpreadNode) -> bool:
        return any(
            config.remove_field and config.matches(directive)
            for directive in node.directives or ()
            for config in configs
        )

    def directive_test(node: DirectiveNode) -> bool:
        return any(not config.remove_field and config.matches(node) for config in configs)

    return _remove(document, selection_test, directive_test, selection_test)


def remove_fields(document: DocumentNode, predicate: FieldPredicate) -> DocumentNode | None:
    """Drop every field node for which *predicate* is true."""
    return _remove(document, predicate, _never)


def remove_client_fields(document: DocumentNode) -> DocumentNode | None:
    """Drop fields resolved locally (``@client``); they never reach a server."""
    return remove_directive_nodes(document, DirectiveRemoval(name="client", remove_field=True))


def remove_connection_directives(document: DocumentNode) -> DocumentNode | None:
    """Drop ``@connection`` pagination-bookkeeping directives, keeping their fields."""
    return remove_directive_nodes(document, DirectiveRemoval(name="connection"))


class _TypenameRemover(Visitor):
    def enter_selection_set(self, node: SelectionSetNode, *_args: Any) -> Any:
        kept = tuple(
            selection
            for selection in node.selections
            if not (isinstance(selection, FieldNode) and selection.name.value == TYPENAME_FIELD)
        )
        # a selection set of only __typename is a real request, leave it
        if not kept or len(kept) == len(node.selections):
            return None
        return SelectionSetNode(selections=kept, loc=node.loc)


def remove_typename_fields(document: DocumentNode) -> DocumentNode:
    """Drop ``__typename`` metadata fields that sit beside other selections."""
    return visit(document, _TypenameRemover())


__all__ = [
    "DirectiveRemoval",
    "TYPENAME_FIELD",
    "remove_client_fields",
    "remove_connection_directives",
    "remove_directive_nodes",
    "remove_fields",
    "remove_typename_fields",
]
