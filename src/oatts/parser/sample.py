"""Sample value generation from JSON schemas.

Values are random but schema-conformant: ``example`` and ``default`` win,
then ``enum``, then a value drawn for the declared ``type`` and ``format``.
Passing a seed makes the output reproducible.
"""

import random
from typing import Any

from faker import Faker

MAX_DEPTH = 10

DEFAULT_MINIMUM = -10_000
DEFAULT_MAXIMUM = 10_000
DEFAULT_MAX_ITEMS = 3


class SchemaSampler:
    """Generates sample values for (already $ref-resolved) schemas."""

    def __init__(self, seed: int | None = None):
        self.random = random.Random(seed)
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def sample(self, schema: dict, depth: int = 0) -> Any:
        if depth > MAX_DEPTH:
            return None

        if "example" in schema:
            return schema["example"]
        if "default" in schema:
            return schema["default"]
        if schema.get("enum"):
            return self.random.choice(schema["enum"])

        if "allOf" in schema:
            return self._sample_all_of(schema, depth)
        for keyword in ("oneOf", "anyOf"):
            if schema.get(keyword):
                return self.sample(schema[keyword][0], depth + 1)

        schema_type = schema.get("type")
        if schema_type == "object" or (schema_type is None and "properties" in schema):
            return self._sample_object(schema, depth)
        if schema_type == "array":
            return self._sample_array(schema, depth)
        if schema_type == "integer":
            return self._sample_integer(schema)
        if schema_type == "number":
            return self._sample_number(schema)
        if schema_type == "boolean":
            return self.random.choice([True, False])
        if schema_type == "string" or schema_type is None:
            return self._sample_string(schema)
        return None

    def _sample_object(self, schema: dict, depth: int) -> dict:
        result = {}
        for name, prop in schema.get("properties", {}).items():
            if isinstance(prop, dict):
                result[name] = self.sample(prop, depth + 1)
        additional = schema.get("additionalProperties")
        if not result and isinstance(additional, dict):
            result[self.faker.word()] = self.sample(additional, depth + 1)
        return result

    def _sample_all_of(self, schema: dict, depth: int) -> Any:
        merged: dict = {}
        for sub in schema["allOf"]:
            value = self.sample(sub, depth + 1)
            if not isinstance(value, dict):
                return value
            merged.update(value)
        for name, prop in schema.get("properties", {}).items():
            merged[name] = self.sample(prop, depth + 1)
        return merged

    def _sample_array(self, schema: dict, depth: int) -> list:
        items = schema.get("items", {"type": "string"})
        low = schema.get("minItems", 1)
        high = max(low, schema.get("maxItems", low + DEFAULT_MAX_ITEMS - 1))
        return [self.sample(items, depth + 1) for _ in range(self.random.randint(low, high))]

    def _bounds(self, schema: dict) -> tuple[float, float]:
        low = schema.get("minimum", DEFAULT_MINIMUM)
        high = schema.get("maximum", DEFAULT_MAXIMUM)
        if "minimum" in schema and "maximum" not in schema:
            high = max(high, low + DEFAULT_MAXIMUM)
        if "maximum" in schema and "minimum" not in schema:
            low = min(low, high - DEFAULT_MAXIMUM)
        return low, high

    def _sample_integer(self, schema: dict) -> int:
        low, high = self._bounds(schema)
        low = int(low) + 1 if schema.get("exclusiveMinimum") is True else int(low)
        high = int(high) - 1 if schema.get("exclusiveMaximum") is True else int(high)
        return self.random.randint(low, max(low, high))

    def _sample_number(self, schema: dict) -> float:
        low, high = self._bounds(schema)
        return round(self.random.uniform(low, high), 2)

    def _sample_string(self, schema: dict) -> str:
        fmt = schema.get("format")
        if fmt == "date-time":
            return self.faker.date_time().isoformat() + "Z"
        if fmt == "date":
            return self.faker.date()
        if fmt == "email":
            return self.faker.email()
        if fmt == "uuid":
            return self.faker.uuid4()
        if fmt in ("uri", "url"):
            return self.faker.url()
        if fmt == "hostname":
            return self.faker.hostname()
        if fmt == "ipv4":
            return self.faker.ipv4()
        if fmt == "ipv6":
            return self.faker.ipv6()
        if fmt == "password":
            return self.faker.password(length=max(schema.get("minLength", 10), 10))
        if fmt == "byte":
            return self.faker.pystr().encode().hex()

        min_length = schema.get("minLength", 0)
        max_length = schema.get("maxLength", max(min_length, 20))
        value = self.faker.word()
        while len(value) < min_length:
            value += self.faker.word()
        return value[:max_length]
