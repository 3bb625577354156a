from graphql import (
    GraphQLField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLType,
    GraphQLUnionType,
    get_named_type,
)

from sdl_decompose.models import DecompositionOptions
from sdl_decompose.utils.graphql_type import is_builtin_scalar_type


class TypeCollector:
    """
    Collects the named types reachable from a root field.

    Types are recorded in the order they are first visited: a depth-first walk over fields in
    declaration order, each field's return type before its arguments. Visited types are
    tracked by identity, which both removes duplicates and stops the walk on cyclic
    references such as ``User.posts -> Post.author -> User``.
    """

    def __init__(self, options: DecompositionOptions | None = None) -> None:
        self.options = options or DecompositionOptions()
        self.visited: set[GraphQLNamedType] = set()
        self.collected: list[GraphQLNamedType] = []

    @property
    def type_names(self) -> list[str]:
        return [named_type.name for named_type in self.collected]

    def collect_from_field(self, field: GraphQLField) -> list[GraphQLNamedType]:
        """Collect the return type and argument types of a field, transitively.

        Args:
            field: The root field to start from

        Returns:
            The collected types, in first visit order
        """
        self.visit_types(field_references(field))
        return self.collected

    def visit_type(self, type_: GraphQLType | None) -> None:
        self.visit_types([type_])

    def visit_types(self, type_refs: list[GraphQLType | None]) -> None:
        """Walk the given type references and everything reachable from them.

        Uses an explicit stack instead of recursion. References are pushed in reverse, so
        types are popped in depth-first pre-order.
        """
        stack = list(reversed(type_refs))
        while stack:
            named_type = get_named_type(stack.pop())
            if named_type is None or named_type in self.visited:
                continue

            if is_builtin_scalar_type(named_type.name) and not self.options.include_builtin_scalars:
                continue

            self.visited.add(named_type)
            self.collected.append(named_type)
            stack.extend(reversed(referenced_types(named_type)))


def field_references(field: GraphQLField) -> list[GraphQLType | None]:
    return [field.type, *(arg.type for arg in field.args.values())]


def referenced_types(named_type: GraphQLNamedType) -> list[GraphQLType | None]:
    """Return the types a named type refers to directly, in declaration order."""
    if isinstance(named_type, GraphQLObjectType | GraphQLInterfaceType):
        refs: list[GraphQLType | None] = []
        for field in named_type.fields.values():
            refs.extend(field_references(field))
        # Printed as "implements X", so X has to be part of the output as well
        refs.extend(named_type.interfaces)
        return refs
    if isinstance(named_type, GraphQLInputObjectType):
        return [input_field.type for input_field in named_type.fields.values()]
    if isinstance(named_type, GraphQLUnionType):
        return list(named_type.types)
    # Scalar and enum types don't reference other types
    return []
