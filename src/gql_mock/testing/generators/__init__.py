"""Testing generators – property-based strategies."""
from gql_mock.testing.generators.strategies import reformatted_query_strategy

__all__ = ["reformatted_query_strategy"]
