from pathlib import Path

import pytest
from ariadne import gql


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    BLOG_SCHEMA: Path = TESTS_DATA_DIR / "blog.graphql"
    SPLIT_SCHEMA_DIR: Path = TESTS_DATA_DIR / "split"


@pytest.fixture(scope="module")
def blog_schema_path() -> Path:
    assert TestSchemaData.BLOG_SCHEMA.exists(), f"Missing test file: {TestSchemaData.BLOG_SCHEMA}"
    return TestSchemaData.BLOG_SCHEMA


@pytest.fixture(scope="module")
def split_schema_dir() -> Path:
    assert TestSchemaData.SPLIT_SCHEMA_DIR.is_dir(), f"Missing test folder: {TestSchemaData.SPLIT_SCHEMA_DIR}"
    return TestSchemaData.SPLIT_SCHEMA_DIR


@pytest.fixture
def user_post_sdl() -> str:
    return gql(
        """
        type Query {
            getUser(id: ID!): User
            getPost(id: ID!): Post
        }

        type User {
            id: ID!
            name: String!
            posts: [Post!]!
        }

        type Post {
            id: ID!
            title: String!
            author: User!
        }
        """
    )


@pytest.fixture
def commented_sdl() -> str:
    return gql(
        """
        # This is a comment about the Query type
        type Query {
            # Get a user by ID
            getUser(id: ID!): User # inline comment
            # Get a post by ID
            getPost(id: ID!): Post
        }

        \"\"\"
        User type represents a user in the system
        with multiple lines of description
        \"\"\"
        type User {
            id: ID! # User identifier
            "The display name"
            name: String! # User name
            # User's posts
            posts: [Post!]!
        }

        # Post type comment
        type Post {
            id: ID!
            title: String!
            author: User!
        }
        """
    )


@pytest.fixture
def deprecated_sdl() -> str:
    return gql(
        """
        type Query {
            getUser(id: ID!): User
            getPost(id: ID!): Post
        }

        type User {
            id: ID!
            name: String!
            email: String! @deprecated(reason: "Use contactInfo instead")
            contactInfo: String!
            oldField: String @deprecated
            posts: [Post!]!
        }

        type Post {
            id: ID!
            title: String!
            content: String!
            author: User!
            legacyField: Int @deprecated(reason: "No longer supported")
        }
        """
    )
