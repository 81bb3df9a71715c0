from oatts.parser.sample import MAX_DEPTH, SchemaSampler


class TestSchemaSampler:
    def test_seed_is_reproducible(self):
        schema = {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
                "email": {"type": "string", "format": "email"},
            },
        }
        assert SchemaSampler(seed=42).sample(schema) == SchemaSampler(seed=42).sample(schema)

    def test_example_wins(self):
        assert SchemaSampler().sample({"type": "string", "example": "doggie", "enum": ["x"]}) == "doggie"

    def test_default_used(self):
        assert SchemaSampler().sample({"type": "boolean", "default": False}) is False

    def test_enum(self):
        values = {SchemaSampler(seed=i).sample({"type": "string", "enum": ["a", "b"]}) for i in range(20)}
        assert values <= {"a", "b"}

    def test_integer_bounds(self):
        sampler = SchemaSampler(seed=3)
        for _ in range(50):
            value = sampler.sample({"type": "integer", "minimum": 1, "maximum": 10})
            assert isinstance(value, int)
            assert 1 <= value <= 10

    def test_integer_exclusive_bounds(self):
        sampler = SchemaSampler(seed=3)
        for _ in range(20):
            value = sampler.sample({"type": "integer", "minimum": 0, "maximum": 2, "exclusiveMinimum": True, "exclusiveMaximum": True})
            assert value == 1

    def test_number(self):
        value = SchemaSampler(seed=5).sample({"type": "number", "minimum": 0, "maximum": 1})
        assert isinstance(value, float)
        assert 0 <= value <= 1

    def test_string_length(self):
        value = SchemaSampler(seed=5).sample({"type": "string", "minLength": 25, "maxLength": 30})
        assert 25 <= len(value) <= 30

    def test_string_formats(self):
        sampler = SchemaSampler(seed=5)
        assert "@" in sampler.sample({"type": "string", "format": "email"})
        assert len(sampler.sample({"type": "string", "format": "uuid"})) == 36
        assert sampler.sample({"type": "string", "format": "date-time"}).endswith("Z")

    def test_array_item_count(self):
        sampler = SchemaSampler(seed=9)
        for _ in range(20):
            value = sampler.sample({"type": "array", "items": {"type": "boolean"}, "minItems": 2, "maxItems": 4})
            assert 2 <= len(value) <= 4
            assert all(isinstance(v, bool) for v in value)

    def test_object_properties(self):
        value = SchemaSampler(seed=1).sample(
            {"properties": {"id": {"type": "integer"}, "tags": {"type": "array", "items": {"type": "string"}}}}
        )
        assert set(value) == {"id", "tags"}

    def test_all_of_merges(self):
        value = SchemaSampler(seed=1).sample(
            {
                "allOf": [
                    {"type": "object", "properties": {"id": {"type": "integer"}}},
                    {"type": "object", "properties": {"name": {"type": "string"}}},
                ]
            }
        )
        assert set(value) == {"id", "name"}

    def test_one_of_takes_first_branch(self):
        value = SchemaSampler(seed=1).sample({"oneOf": [{"type": "integer", "minimum": 5, "maximum": 5}, {"type": "string"}]})
        assert value == 5

    def test_depth_limit(self):
        assert SchemaSampler().sample({"type": "string"}, depth=MAX_DEPTH + 1) is None
