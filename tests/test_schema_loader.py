import io
from pathlib import Path

import pytest
from ariadne.exceptions import GraphQLFileSyntaxError

from sdl_decompose import decompose
from sdl_decompose.utils.schema_loader import load_sdl_from_paths, load_sdl_from_stream, resolve_graphql_files


def test_resolve_graphql_files(split_schema_dir: Path, blog_schema_path: Path) -> None:
    files = resolve_graphql_files([split_schema_dir, blog_schema_path, blog_schema_path])

    assert files == sorted([blog_schema_path, split_schema_dir / "query.graphql", split_schema_dir / "types.graphql"])


def test_resolve_ignores_other_files(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("not a schema")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "schema.graphql").write_text("type Query { ping: String }")

    assert resolve_graphql_files([tmp_path]) == [tmp_path / "nested" / "schema.graphql"]


def test_load_split_schema(split_schema_dir: Path) -> None:
    sdl = load_sdl_from_paths(resolve_graphql_files([split_schema_dir]))

    result = decompose(sdl, "product")

    assert result.collected_type_names == ["Product", "Money", "Currency"]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="SDL file not found"):
        load_sdl_from_paths([tmp_path / "missing.graphql"])


def test_load_invalid_file(tmp_path: Path) -> None:
    broken = tmp_path / "broken.graphql"
    broken.write_text("type Query {")

    with pytest.raises(GraphQLFileSyntaxError):
        load_sdl_from_paths([broken])


def test_load_from_stream() -> None:
    assert load_sdl_from_stream(io.StringIO("type Query { ping: String }")) == "type Query { ping: String }"


def test_load_from_empty_stream() -> None:
    with pytest.raises(ValueError, match="No SDL content provided via stdin"):
        load_sdl_from_stream(io.StringIO("  \n"))
