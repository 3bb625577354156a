from collections.abc import Iterable

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    print_ast,
    print_type,
)
from graphql.utilities.print_schema import print_deprecated

from sdl_decompose.models import OperationKind
from sdl_decompose.utils.graphql_type import is_builtin_scalar_type, is_root_type


def get_root_type(schema: GraphQLSchema, operation_kind: OperationKind) -> GraphQLObjectType | None:
    """Return the schema's root type for the given operation kind, if it defines one."""
    if operation_kind is OperationKind.QUERY:
        return schema.query_type
    if operation_kind is OperationKind.MUTATION:
        return schema.mutation_type
    return schema.subscription_type


def get_operation_field(
    schema: GraphQLSchema, operation_kind: OperationKind, operation_name: str
) -> GraphQLField | None:
    root_type = get_root_type(schema, operation_kind)
    if root_type is None:
        return None
    return root_type.fields.get(operation_name)


def print_argument(name: str, arg: GraphQLArgument) -> str:
    printed = f"{name}: {arg.type}"
    if arg.ast_node and arg.ast_node.default_value:
        printed += f" = {print_ast(arg.ast_node.default_value)}"
    return printed + print_deprecated(arg.deprecation_reason)


def print_field_signature(field: GraphQLField) -> str:
    """Render the argument list, return type and deprecation of a field, e.g. ``(id: ID!): User``."""
    args = ""
    if field.args:
        args = f"({', '.join(print_argument(name, arg) for name, arg in field.args.items())})"
    return f"{args}: {field.type}{print_deprecated(field.deprecation_reason)}"


def print_root_type(operation_kind: OperationKind, operation_name: str, field: GraphQLField) -> str:
    return f"type {operation_kind.root_type_name} {{\n  {operation_name}{print_field_signature(field)}\n}}"


def reconstruct_sdl(
    schema: GraphQLSchema,
    collected: Iterable[GraphQLNamedType],
    operation_kind: OperationKind,
    operation_name: str,
) -> str:
    """
    Assemble the partial SDL for one operation.

    The output starts with a root type holding only the requested operation, followed by the
    definition of every collected type in collection order. Types named like a root type are
    left out, since the synthetic root already takes that name, and so are built-in scalars,
    which have no definition to print.

    Args:
        schema: The schema the types were collected from
        collected: The collected types, in output order
        operation_kind: Which root type holds the operation
        operation_name: The name of the operation field

    Returns:
        The partial SDL, or an empty string if the operation is not defined in the schema
    """
    field = get_operation_field(schema, operation_kind, operation_name)
    if field is None:
        return ""

    type_defs = [print_root_type(operation_kind, operation_name, field)]

    for named_type in collected:
        if is_root_type(named_type.name) or is_builtin_scalar_type(named_type.name):
            continue
        type_defs.append(print_type(named_type))

    return "\n\n".join(type_defs)
