from graphql import GraphQLError, GraphQLSchema, build_ast_schema, parse

from sdl_decompose import log
from sdl_decompose.collector import TypeCollector
from sdl_decompose.filters import filter_document
from sdl_decompose.models import DecompositionOptions, DecompositionResult, OperationKind
from sdl_decompose.reconstructor import get_operation_field, reconstruct_sdl


class DecompositionError(Exception):
    """Raised when the SDL cannot be parsed or no schema can be built from it."""


def build_filtered_schema(full_sdl: str, options: DecompositionOptions) -> GraphQLSchema:
    """Parse the SDL, apply the document filters and build the schema.

    Raises:
        DecompositionError: If parsing or building fails
    """
    try:
        document = parse(full_sdl)
        document = filter_document(document, options)
        schema = build_ast_schema(document)
    except (GraphQLError, TypeError) as e:
        raise DecompositionError(f"Failed to decompose GraphQL: {e}") from e

    log.debug(f"Built schema with {len(schema.type_map)} types")
    return schema


def decompose(
    full_sdl: str,
    operation_name: str,
    operation_kind: OperationKind | str = OperationKind.QUERY,
    options: DecompositionOptions | None = None,
) -> DecompositionResult:
    """
    Extract the part of a schema needed by a single root operation.

    Args:
        full_sdl: The complete schema, as SDL text
        operation_name: Name of the field on the root type
        operation_kind: Root type the field is looked up on
        options: Filtering options, defaults apply when omitted

    Returns:
        The partial SDL with the names of the collected types. When the root type or the
        field does not exist, the result is empty and ``operation_found`` is False.

    Raises:
        DecompositionError: If the SDL cannot be parsed or built into a schema
        ValueError: If ``operation_kind`` is not a known operation kind
    """
    operation_kind = OperationKind(operation_kind)
    options = options or DecompositionOptions()

    schema = build_filtered_schema(full_sdl, options)

    field = get_operation_field(schema, operation_kind, operation_name)
    if field is None:
        log.debug(f"Operation '{operation_name}' not found in {operation_kind.value} type")
        return DecompositionResult.not_found()

    collector = TypeCollector(options)
    collected = collector.collect_from_field(field)
    log.debug(f"Collected {len(collected)} types for operation '{operation_name}'")

    sdl = reconstruct_sdl(schema, collected, operation_kind, operation_name)

    return DecompositionResult(
        sdl=sdl,
        collected_type_names=collector.type_names,
        operation_found=True,
    )
