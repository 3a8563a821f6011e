from pydantic import BaseModel, Field

from domain.enums import PatternGroup


class ExampleInfo(BaseModel):
    """One runnable example in the catalog"""

    slug: str = Field(..., description="Identifier such as 'command.document_processing'")
    group: PatternGroup
    pattern: str = Field(..., description="Pattern name, e.g. 'Abstract Factory'")
    title: str = Field(..., description="Short title of the example")
    summary: str = Field(default="", description="What the example demonstrates")
    module: str = Field(..., description="Importable module exposing main()")

    model_config = {"from_attributes": True}


class ExampleRunResponse(BaseModel):
    """Captured console output of a single example run"""

    slug: str
    output: str
