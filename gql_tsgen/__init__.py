"""gql-tsgen: JSON-scalar transformer generator for GraphQL react-query clients."""

__version__ = "0.1.0"
