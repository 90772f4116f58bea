"""Diagnostic entity - one compiler or tool message from xcodebuild output."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import DiagnosticKind


class Diagnostic(BaseModel):
    """A build error or warning, with its source location when known."""

    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    message: str
    kind: DiagnosticKind = Field(..., alias="type")

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )

    @property
    def is_error(self) -> bool:
        return self.kind == DiagnosticKind.ERROR
