"""Spec model for parsed API documents.

The Swagger/OpenAPI parser converts its input into these models; the
test plan compiler only reads them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from oatts.errors import SampleError
from oatts.parser.sample import SchemaSampler

NUMBER_TYPES = ("integer", "number", "float", "long", "double")


class Parameter(BaseModel):
    """A single request parameter (body, query, formData, path, or header)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    location: str  # body / query / formData / path / header / cookie
    required: bool = False
    param_type: str = "string"
    description: str = ""
    schema_: dict = Field(default_factory=dict, alias="schema")

    @property
    def is_numeric(self) -> bool:
        return self.param_type in NUMBER_TYPES

    @property
    def can_sample(self) -> bool:
        """Whether a representative value can be generated for this parameter."""
        if self.param_type == "file":
            return False
        return not (self.schema_.get("type") == "string" and self.schema_.get("format") == "binary")

    def sample(self, sampler: SchemaSampler) -> Any:
        if not self.can_sample:
            raise SampleError(f"cannot generate a sample for {self.location} parameter '{self.name}'")
        return sampler.sample(self.schema_)


class Response(BaseModel):
    """A declared response of an operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: str
    description: str = ""
    schema_: dict | None = Field(default=None, alias="schema")

    def sample(self, sampler: SchemaSampler) -> Any:
        if self.schema_ is None:
            return None
        return sampler.sample(self.schema_)


class Operation(BaseModel):
    """One HTTP method on a path, with its merged parameter list."""

    model_config = ConfigDict(frozen=True)

    method: str  # lowercase
    summary: str = ""
    parameters: list[Parameter] = []
    consumes: list[str] | None = None
    produces: list[str] | None = None
    responses: list[Response] = []

    def status_codes(self) -> list[str]:
        return [r.status_code for r in self.responses]


class PathItem(BaseModel):
    """A path template with its path-level parameters and operations."""

    model_config = ConfigDict(frozen=True)

    path: str
    parameters: list[Parameter] = []
    operations: list[Operation] = []


class ApiSpec(BaseModel):
    """The parsed document: global values plus all declared paths."""

    model_config = ConfigDict(frozen=True)

    host: str | None = None
    base_path: str = ""
    schemes: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    paths: list[PathItem] = []

    def get_path(self, path: str) -> PathItem | None:
        for item in self.paths:
            if item.path == path:
                return item
        return None
