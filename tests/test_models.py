import pytest

from oatts.errors import OattsError, OptionsError, SampleError, SpecError
from oatts.parser.base import ApiSpec, Operation, Parameter, PathItem, Response
from oatts.parser.sample import SchemaSampler


class TestParameter:
    def test_create_path_param(self):
        p = Parameter(name="petId", location="path", required=True, param_type="integer", schema={"type": "integer"})
        assert p.name == "petId"
        assert p.is_numeric is True
        assert p.description == ""
        assert p.can_sample is True

    def test_string_param_is_not_numeric(self):
        p = Parameter(name="username", location="path", schema={"type": "string"})
        assert p.is_numeric is False

    def test_file_param_cannot_sample(self):
        p = Parameter(name="file", location="formData", param_type="file", schema={"type": "file"})
        assert p.can_sample is False
        with pytest.raises(SampleError):
            p.sample(SchemaSampler(seed=1))

    def test_binary_string_cannot_sample(self):
        p = Parameter(name="file", location="formData", schema={"type": "string", "format": "binary"})
        assert p.can_sample is False

    def test_sample_uses_schema(self):
        p = Parameter(name="status", location="query", schema={"type": "string", "enum": ["sold"]})
        assert p.sample(SchemaSampler(seed=1)) == "sold"


class TestResponse:
    def test_sample_without_schema_is_none(self):
        r = Response(status_code="404", description="Not found")
        assert r.sample(SchemaSampler(seed=1)) is None

    def test_sample_with_schema(self):
        r = Response(status_code="200", schema={"type": "object", "properties": {"name": {"type": "string", "example": "doggie"}}})
        assert r.sample(SchemaSampler(seed=1)) == {"name": "doggie"}


class TestApiSpec:
    def test_get_path(self):
        spec = ApiSpec(
            paths=[
                PathItem(path="/pet", operations=[Operation(method="post")]),
                PathItem(path="/user"),
            ]
        )
        assert spec.get_path("/pet").operations[0].method == "post"
        assert spec.get_path("/nope") is None

    def test_defaults(self):
        spec = ApiSpec()
        assert spec.host is None
        assert spec.base_path == ""
        assert spec.consumes == []

    def test_operation_status_codes(self):
        op = Operation(method="get", responses=[Response(status_code="200"), Response(status_code="default")])
        assert op.status_codes() == ["200", "default"]
        assert op.consumes is None


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(SpecError, OattsError)
        assert issubclass(SampleError, OattsError)
        assert issubclass(OptionsError, OattsError)

    def test_spec_error_with_source(self):
        err = SpecError("cannot parse document", source="petstore.yaml")
        assert err.source == "petstore.yaml"
        assert str(err) == "petstore.yaml: cannot parse document"
