"""Unit tests for document node-removal transforms."""

from __future__ import annotations

from graphql import print_ast

from gql_mock.documents import (
    DirectiveRemoval,
    gql,
    remove_client_fields,
    remove_connection_directives,
    remove_directive_nodes,
    remove_fields,
    remove_typename_fields,
)


def _print(document) -> str | None:
    return print_ast(document) if document is not None else None


class TestRemoveClientFields:
    def test_drops_client_field(self) -> None:
        doc = gql("query Q { user { id isSelected @client } }")
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { user { id } }"))

    def test_drops_parent_whose_selection_becomes_empty(self) -> None:
        doc = gql("query Q { user { id } local { flag @client } }")
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { user { id } }"))

    def test_entirely_client_operation_returns_none(self) -> None:
        doc = gql("query Q { settings @client { theme } }")
        assert remove_client_fields(doc) is None

    def test_emptied_fragment_and_spreads_are_removed(self) -> None:
        doc = gql(
            """
            query Q { user { id ...Local } }
            fragment Local on User { selected @client }
            """
        )
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { user { id } }"))

    def test_emptied_inline_fragment_is_removed(self) -> None:
        doc = gql("query Q { node { id ... on User { draft @client } } }")
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { node { id } }"))

    def test_client_inline_fragment_is_removed(self) -> None:
        doc = gql("query Q { node { id ... on User @client { draft } } }")
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { node { id } }"))

    def test_client_fragment_spread_and_its_definition_are_removed(self) -> None:
        doc = gql(
            """
            query Q { user { id ...Local @client } }
            fragment Local on User { draft ...Nested }
            fragment Nested on User { flag }
            """
        )
        assert _print(remove_client_fields(doc)) == _print(gql("query Q { user { id } }"))

    def test_fragment_still_spread_elsewhere_is_kept(self) -> None:
        doc = gql(
            """
            query Q { user { ...Base @client } me { ...Base } }
            fragment Base on User { id }
            """
        )
        expected = gql(
            """
            query Q { me { ...Base } }
            fragment Base on User { id }
            """
        )
        assert _print(remove_client_fields(doc)) == _print(expected)

    def test_input_is_not_mutated(self) -> None:
        doc = gql("query Q { user { id local @client } }")
        before = print_ast(doc)
        remove_client_fields(doc)
        assert print_ast(doc) == before

    def test_document_without_client_fields_is_unchanged(self) -> None:
        doc = gql("query Q { user { id } }")
        assert _print(remove_client_fields(doc)) == print_ast(doc)


class TestRemoveConnectionDirectives:
    def test_keeps_field_and_drops_directive(self) -> None:
        doc = gql('query Q { feed(first: 10) @connection(key: "feed") { id } }')
        assert _print(remove_connection_directives(doc)) == _print(
            gql("query Q { feed(first: 10) { id } }")
        )

    def test_other_directives_survive(self) -> None:
        doc = gql("query Q($s: Boolean!) { feed @connection(key: \"f\") @include(if: $s) { id } }")
        result = _print(remove_connection_directives(doc))
        assert result is not None
        assert "@include(if: $s)" in result
        assert "@connection" not in result


class TestRemoveTypenameFields:
    def test_drops_typename_next_to_other_fields(self) -> None:
        doc = gql("query Q { user { __typename id } }")
        assert _print(remove_typename_fields(doc)) == _print(gql("query Q { user { id } }"))

    def test_keeps_lone_typename(self) -> None:
        doc = gql("query Q { __typename }")
        assert _print(remove_typename_fields(doc)) == print_ast(doc)


class TestGenericRemoval:
    def test_remove_fields_by_predicate(self) -> None:
        doc = gql("query Q { user { id secret } }")
        result = remove_fields(doc, lambda field: field.name.value == "secret")
        assert _print(result) == _print(gql("query Q { user { id } }"))

    def test_directive_removal_by_test(self) -> None:
        doc = gql("query Q { user { id name @local(mode: \"x\") } }")
        result = remove_directive_nodes(
            doc, DirectiveRemoval(test=lambda d: d.name.value.startswith("loc"), remove_field=True)
        )
        assert _print(result) == _print(gql("query Q { user { id } }"))

    def test_multiple_configs(self) -> None:
        doc = gql('query Q { a @client b @connection(key: "b") { id } }')
        result = remove_directive_nodes(
            doc,
            DirectiveRemoval(name="client", remove_field=True),
            DirectiveRemoval(name="connection"),
        )
        assert _print(result) == _print(gql("query Q { b { id } }"))
