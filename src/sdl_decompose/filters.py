"""
AST passes applied to the parsed SDL before the schema is built.

Removing deprecated fields has to happen here, ahead of schema building, because a type that
is only referenced through a deprecated field must drop out of the collected closure.
Description removal could run at any point; doing it on the document keeps both edits in a
single place.
"""

from copy import copy
from typing import Any

from graphql import (
    REMOVE,
    DirectiveNode,
    DocumentNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    Node,
    Visitor,
    visit,
)

from sdl_decompose import log
from sdl_decompose.models import DecompositionOptions
from sdl_decompose.utils.directive import DEPRECATED_DIRECTIVE_NAME, is_deprecated, is_directive_named


class DeprecatedFieldRemover(Visitor):
    """Drops every field marked with ``@deprecated`` together with the remaining markers."""

    def __init__(self) -> None:
        super().__init__()
        self.removed_fields: list[str] = []

    def enter_field_definition(self, node: FieldDefinitionNode, *_args: Any) -> Any:
        if is_deprecated(node):
            self.removed_fields.append(node.name.value)
            return REMOVE
        return None

    def enter_input_object_type_definition(self, node: InputObjectTypeDefinitionNode, *_args: Any) -> Any:
        # Input fields are input value definitions, like arguments, so they are pruned from
        # the owning type to leave deprecated arguments in place.
        fields = node.fields or ()
        kept_fields = [field for field in fields if not is_deprecated(field)]
        if len(kept_fields) == len(fields):
            return None

        self.removed_fields.extend(field.name.value for field in fields if is_deprecated(field))
        filtered_node = copy(node)
        filtered_node.fields = tuple(kept_fields)
        return filtered_node

    def enter_directive(self, node: DirectiveNode, *_args: Any) -> Any:
        if is_directive_named(node, DEPRECATED_DIRECTIVE_NAME):
            return REMOVE
        return None


class DescriptionRemover(Visitor):
    """Clears the description of every definition in the document."""

    def enter(self, node: Node, *_args: Any) -> Any:
        if getattr(node, "description", None) is None:
            return None
        stripped_node = copy(node)
        stripped_node.description = None  # type: ignore[attr-defined]
        return stripped_node


def filter_document(document: DocumentNode, options: DecompositionOptions) -> DocumentNode:
    """Apply the AST edits requested by the options.

    Args:
        document: The parsed SDL document, left untouched
        options: The decomposition options

    Returns:
        A new document with the edits applied, or the given document if no edit is needed
    """
    if not options.needs_document_filter:
        return document

    if not options.include_deprecated:
        remover = DeprecatedFieldRemover()
        document = visit(document, remover)
        if remover.removed_fields:
            log.debug(f"Removed {len(remover.removed_fields)} deprecated field(s): {', '.join(remover.removed_fields)}")

    if options.exclude_comments:
        document = visit(document, DescriptionRemover())
        log.debug("Removed descriptions from the document")

    return document
