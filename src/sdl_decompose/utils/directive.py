from graphql import DirectiveNode, FieldDefinitionNode, InputValueDefinitionNode

DEPRECATED_DIRECTIVE_NAME = "deprecated"


def is_directive_named(directive: DirectiveNode, directive_name: str) -> bool:
    return directive.name.value == directive_name


def has_given_directive(node: FieldDefinitionNode | InputValueDefinitionNode, directive_name: str) -> bool:
    """Check whether a field definition node carries a particular directive."""
    if node.directives:
        for directive in node.directives:
            if is_directive_named(directive, directive_name):
                return True
    return False


def is_deprecated(node: FieldDefinitionNode | InputValueDefinitionNode) -> bool:
    return has_given_directive(node, DEPRECATED_DIRECTIVE_NAME)
