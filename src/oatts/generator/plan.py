"""Test plan records produced by the compiler.

The plan is a plain, ordered tree (TestPlan -> PathPlan -> OperationPlan
-> Transaction) with no behaviour attached. ``model_dump(by_alias=True)``
gives the camelCase record shape consumed by templates.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class PlanRecord(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ExpectedResponse(PlanRecord):
    status_code: str
    res: Any = None
    custom: bool = False

    @model_serializer(mode="wrap")
    def serialize_expected(self, handler: SerializerFunctionWrapHandler) -> dict:
        # no res key without schema, sample or override; a custom null is kept
        data = handler(self)
        if self.res is None and not self.custom:
            data.pop("res", None)
        return data


class Transaction(PlanRecord):
    description: str
    scheme: str
    host: str
    path: str
    method: str
    body: Any = {}
    query: dict = {}
    form_data: dict = {}
    headers: dict = {}
    expected: ExpectedResponse
    has_value: bool = False


class OperationPlan(PlanRecord):
    description: str
    transactions: list[Transaction]


class PathPlan(PlanRecord):
    name: str
    description: str
    operations: list[OperationPlan]


class TestPlan(PlanRecord):
    __test__ = False  # not a pytest test class

    host: str
    scheme: str
    base_path: str = ""
    consumes: list[str] = []
    produces: list[str] = []
    paths: list[PathPlan]


class SpecSummary(PlanRecord):
    """Global values read once from the spec (and options) per compile."""

    host: str
    scheme: str
    base_path: str = ""
    consumes: list[str] = []
    produces: list[str] = []
