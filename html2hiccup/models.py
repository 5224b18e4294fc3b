"""Pydantic models for converter configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ConverterConfig(BaseModel):
    """Options consulted on every conversion."""

    use_shorthand: bool = Field(
        True,
        alias="useShorthand",
        description="Fold class into the tag header as .segments when possible.",
    )
    skip_document_frame: bool = Field(
        True,
        alias="skipDocumentFrame",
        description="Skip the <html>/<body> wrapper and convert the body's content.",
    )
    all_roots: bool = Field(
        False,
        alias="allRoots",
        description="Convert every top-level element instead of only the first.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")
