ROOT_TYPE_NAMES = frozenset(
    {
        "Query",
        "Mutation",
        "Subscription",
    }
)

BUILTIN_SCALAR_TYPE_NAMES = frozenset(
    {
        "ID",
        "String",
        "Int",
        "Float",
        "Boolean",
    }
)


def is_root_type(type_name: str) -> bool:
    return type_name in ROOT_TYPE_NAMES


def is_builtin_scalar_type(type_name: str) -> bool:
    return type_name in BUILTIN_SCALAR_TYPE_NAMES
