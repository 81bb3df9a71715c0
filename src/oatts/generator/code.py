"""Code generator — renders a compiled test plan into pytest+requests files."""

import json
import logging
import re
from collections.abc import Sized
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from oatts.generator.plan import PathPlan, TestPlan
from oatts.generator.validator import validate_python

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

TOP_LEVEL_TEMPLATE = "top_level.py.j2"
PATH_TEMPLATE = "path_level.py.j2"
OPERATION_TEMPLATE = "operation_level.py.j2"
TRANSACTION_TEMPLATE = "transaction_level.py.j2"
CONFTEST_TEMPLATE = "conftest.py.j2"


def to_json(value: Any) -> str:
    return json.dumps(value, default=str)


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, Sized):
        return len(value) != 0
    return True


def is_not_default_status(code: Any) -> bool:
    return str(code) != "default"


def header_values(headers: dict) -> dict[str, str]:
    """Header values as strings, which is all requests accepts."""
    result = {}
    for name, value in headers.items():
        if isinstance(value, str):
            result[name] = value
        elif isinstance(value, bool):
            result[name] = str(value).lower()
        elif isinstance(value, (dict, list)):
            result[name] = to_json(value)
        else:
            result[name] = str(value)
    return result


def identifier(value: Any) -> str:
    """Reduce a value to a Python identifier fragment."""
    return re.sub(r"\W+", "_", str(value)).strip("_")


def class_name(path_plan: PathPlan) -> str:
    words = re.split(r"\W+", path_plan.name)
    return "Test" + "".join(w[:1].upper() + w[1:] for w in words if w)


def module_name(path_plan: PathPlan) -> str:
    return f"test_{identifier(path_plan.name) or 'root'}.py"


class CodeGenerator:
    """Generates pytest + requests test modules from a TestPlan.

    ``templates`` is an optional directory whose templates take precedence
    over the packaged defaults.
    """

    def __init__(self, templates: Path | None = None):
        search_path = [str(TEMPLATES_DIR)]
        if templates is not None:
            search_path.insert(0, str(templates))
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=False,  # generated code, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["json"] = to_json
        self.env.filters["py"] = repr
        self.env.filters["identifier"] = identifier
        self.env.filters["header_values"] = header_values
        self.env.tests["not_empty"] = not_empty
        self.env.tests["not_default_status"] = is_not_default_status

    def generate(self, plan: TestPlan | None) -> dict[str, str]:
        """Render the plan.

        Returns a dict of {filename: code_content}; empty when there is no plan.
        """
        if plan is None:
            return {}

        files = {"conftest.py": self.env.get_template(CONFTEST_TEMPLATE).render(scheme=plan.scheme, host=plan.host)}
        for path_plan in plan.paths:
            files[module_name(path_plan)] = self._render_path(path_plan)

        for filename, error in validate_python(files).items():
            logger.warning("Rendered %s is not valid Python: %s", filename, error)
        return files

    def _render_path(self, path_plan: PathPlan) -> str:
        operation_template = self.env.get_template(OPERATION_TEMPLATE)
        transaction_template = self.env.get_template(TRANSACTION_TEMPLATE)

        operation_tests = []
        for operation in path_plan.operations:
            tests = [transaction_template.render(**t.model_dump(by_alias=True)) for t in operation.transactions]
            operation_tests.append(operation_template.render(description=operation.description, tests=tests))

        path_test = self.env.get_template(PATH_TEMPLATE).render(
            class_name=class_name(path_plan),
            description=path_plan.description,
            tests=operation_tests,
        )
        return self.env.get_template(TOP_LEVEL_TEMPLATE).render(test=path_test)
