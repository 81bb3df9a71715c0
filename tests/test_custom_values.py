from oatts.generator.custom_values import (
    NO_VALUE,
    Scope,
    find_custom_headers,
    find_custom_response,
    find_custom_value,
)

SCOPE = Scope("/pet/{petId}", "get", "200")


class TestFindCustomValue:
    def test_no_table(self):
        assert find_custom_value(None, "path", "petId", SCOPE) is NO_VALUE
        assert find_custom_value({}, "path", "petId", SCOPE) is NO_VALUE

    def test_global_scope(self):
        table = {"query": {"limit": 10}}
        assert find_custom_value(table, "query", "limit", SCOPE) == 10

    def test_method_scope(self):
        table = {"/pet/{petId}": {"get": {"path": {"petId": 7}}}}
        assert find_custom_value(table, "path", "petId", SCOPE) == 7

    def test_inner_scope_wins(self):
        table = {
            "path": {"petId": 1},
            "/pet/{petId}": {
                "path": {"petId": 2},
                "get": {"path": {"petId": 3}, "200": {"path": {"petId": 4}}},
            },
        }
        assert find_custom_value(table, "path", "petId", SCOPE) == 4
        assert find_custom_value(table, "path", "petId", Scope("/pet/{petId}", "get", "404")) == 3
        assert find_custom_value(table, "path", "petId", Scope("/pet/{petId}", "delete", "404")) == 2
        assert find_custom_value(table, "path", "petId", Scope("/other", "get", "200")) == 1

    def test_absent_inner_slot_keeps_outer_match(self):
        table = {"/pet/{petId}": {"query": {"limit": 5}, "get": {"200": {"query": {"offset": 1}}}}}
        assert find_custom_value(table, "query", "limit", SCOPE) == 5

    def test_falsy_overrides_are_values(self):
        table = {"query": {"zero": 0, "off": False, "blank": "", "nothing": None}}
        assert find_custom_value(table, "query", "zero", SCOPE) == 0
        assert find_custom_value(table, "query", "off", SCOPE) is False
        assert find_custom_value(table, "query", "blank", SCOPE) == ""
        assert find_custom_value(table, "query", "nothing", SCOPE) is None

    def test_other_location_not_used(self):
        table = {"query": {"petId": 3}}
        assert find_custom_value(table, "path", "petId", SCOPE) is NO_VALUE

    def test_malformed_scope_stops_descent(self):
        table = {"query": {"limit": 1}, "/pet/{petId}": "not a mapping"}
        assert find_custom_value(table, "query", "limit", SCOPE) == 1

    def test_missing_intermediate_scope_is_not_skipped(self):
        # a status-code key directly under the path must not match
        table = {"/pet/{petId}": {"200": {"path": {"petId": 9}}}}
        assert find_custom_value(table, "path", "petId", SCOPE) is NO_VALUE

    def test_integer_status_code(self):
        table = {"/pet/{petId}": {"get": {"200": {"path": {"petId": 9}}}}}
        assert find_custom_value(table, "path", "petId", Scope("/pet/{petId}", "get", 200)) == 9


class TestFindCustomHeaders:
    def test_headers_merge_inner_over_outer(self):
        table = {
            "header": {"X-Global": "g", "X-Shared": "outer"},
            "/pet/{petId}": {"get": {"header": {"X-Shared": "inner", "X-Method": "m"}}},
        }
        assert find_custom_headers(table, SCOPE) == {"X-Global": "g", "X-Shared": "inner", "X-Method": "m"}

    def test_no_headers(self):
        assert find_custom_headers({"query": {"a": 1}}, SCOPE) == {}
        assert find_custom_headers(None, SCOPE) == {}


class TestFindCustomResponse:
    def test_exact_scope(self):
        table = {"/pet/{petId}": {"get": {"200": {"response": {"id": 7}}}}}
        assert find_custom_response(table, SCOPE) == {"id": 7}

    def test_outer_response_is_ignored(self):
        table = {"response": {"id": 1}, "/pet/{petId}": {"get": {"response": {"id": 2}}}}
        assert find_custom_response(table, SCOPE) is NO_VALUE

    def test_other_status(self):
        table = {"/pet/{petId}": {"get": {"404": {"response": {"message": "nope"}}}}}
        assert find_custom_response(table, SCOPE) is NO_VALUE

    def test_empty_response_override(self):
        table = {"/pet/{petId}": {"get": {"200": {"response": {}}}}}
        assert find_custom_response(table, SCOPE) == {}


class TestIntegerScopeKeys:
    def test_integer_status_code_key_in_table(self):
        table = {"/pet/{petId}": {"get": {200: {"path": {"petId": 9}}}}}
        assert find_custom_value(table, "path", "petId", SCOPE) == 9
        assert find_custom_response({"/pet/{petId}": {"get": {200: {"response": None}}}}, SCOPE) is None
