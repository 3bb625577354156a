from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OperationKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    @property
    def root_type_name(self) -> str:
        """Canonical name of the root type holding operations of this kind."""
        return self.value.capitalize()


class DecompositionOptions(BaseModel):
    """Switches controlling what ends up in the decomposed SDL.

    By default built-in scalars are left out of the collected types, descriptions are kept
    and deprecated fields are dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    include_builtin_scalars: bool = Field(False, alias="includeBuiltinScalars")
    exclude_comments: bool = Field(False, alias="excludeComments")
    include_deprecated: bool = Field(False, alias="includeDeprecated")

    @property
    def needs_document_filter(self) -> bool:
        return self.exclude_comments or not self.include_deprecated


@dataclass
class DecompositionResult:
    sdl: str
    collected_type_names: list[str] = field(default_factory=list)
    operation_found: bool = True

    @classmethod
    def not_found(cls) -> "DecompositionResult":
        return cls(sdl="", collected_type_names=[], operation_found=False)
