"""Shared fixtures: a small AppSync-style schema and operation documents."""

import pytest
from graphql import parse

from gql_tsgen.core.parser import SchemaParser

SCHEMA_SDL = """
scalar AWSJSON

enum Status {
  ACTIVE
  INACTIVE
}

interface Entity {
  id: ID!
}

type Node implements Entity {
  id: ID!
  status: Status
  payload: AWSJSON
  tags: [Tag!]!
  parent: Node
}

type Tag {
  name: String!
  meta: AWSJSON
}

input NodeInput {
  name: String!
  payload: AWSJSON
}

type Query {
  getNode(id: ID!): Node
  listNodes(limit: Int): [Node!]!
  getStatus: Status
}

type Mutation {
  createNode(input: NodeInput!): Node
  updateSettings(settings: AWSJSON, ids: [ID!]): Node
}

type Subscription {
  onNode: Node
}
"""

DOCUMENTS = """
query GetNode($id: ID!) {
  getNode(id: $id) {
    id
    payload
  }
}

mutation CreateNode($input: NodeInput!) {
  createNode(input: $input) {
    id
  }
}

subscription OnNode {
  onNode {
    id
  }
}

query {
  getStatus
}

query ListNodes($limit: Int = 10) {
  listNodes(limit: $limit) {
    id
  }
}
"""


@pytest.fixture
def schema_ir():
    """IR for SCHEMA_SDL."""
    return SchemaParser().parse_source(SCHEMA_SDL)


@pytest.fixture
def document():
    return parse(DOCUMENTS)


@pytest.fixture
def operations(document):
    """Operation definitions of DOCUMENTS by name (anonymous under None)."""
    return {
        (d.name.value if d.name else None): d
        for d in document.definitions
    }
