import sys
from pathlib import Path
from typing import TextIO

from ariadne import load_schema_from_path

from sdl_decompose import log

GRAPHQL_FILE_PATTERN = "*.graphql"


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths (deduplicated and sorted)
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob(GRAPHQL_FILE_PATTERN):
                resolved_files.add(file)

    return sorted(resolved_files)


def load_sdl_from_paths(graphql_schema_paths: list[Path]) -> str:
    """Read and concatenate the SDL of the given files.

    Each file is checked for syntax errors by ariadne while loading, so a broken file is
    reported with its own name instead of as part of the combined document.

    Raises:
        FileNotFoundError: If one of the paths does not exist
        ariadne.exceptions.GraphQLFileSyntaxError: If a file is not valid GraphQL
    """
    sdl_str = ""
    for graphql_file in graphql_schema_paths:
        if not graphql_file.exists():
            raise FileNotFoundError(f"SDL file not found: {graphql_file.resolve()}")
        log.debug(f"Loading SDL from {graphql_file}")
        sdl_str += load_schema_from_path(graphql_file) + "\n"
    return sdl_str


def load_sdl_from_stream(stream: TextIO | None = None) -> str:
    """Read SDL from a text stream, stdin by default.

    Raises:
        ValueError: If the stream holds no SDL content
    """
    content = (stream or sys.stdin).read()
    if not content.strip():
        raise ValueError("No SDL content provided via stdin")
    return content
