pytest_plugins = ["gql_mock.testing.fixtures"]
