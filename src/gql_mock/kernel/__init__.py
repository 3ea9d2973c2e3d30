"""Kernel – error hierarchy shared by every gql_mock layer."""
