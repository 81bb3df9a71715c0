from oatts.generator.validator import validate_python


class TestValidatePython:
    def test_valid_code(self):
        errors = validate_python({"test_ok.py": "import os\nx = 1\n"})
        assert errors == {}

    def test_syntax_error(self):
        errors = validate_python({"test_bad.py": "def foo(\n"})
        assert "test_bad.py" in errors
        assert "SyntaxError" in errors["test_bad.py"]

    def test_skips_non_python(self):
        errors = validate_python({"plan.json": "{", "test_ok.py": "x = 1"})
        assert errors == {}

    def test_skips_empty_init(self):
        errors = validate_python({"__init__.py": ""})
        assert errors == {}
