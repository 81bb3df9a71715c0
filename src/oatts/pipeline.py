"""End-to-end generation: parse document -> compile plan -> render files."""

import logging
from pathlib import Path

from pydantic import BaseModel

from oatts.generator.code import CodeGenerator
from oatts.generator.compiler import compile_plan
from oatts.generator.options import GenerateOptions
from oatts.generator.plan import TestPlan
from oatts.parser.swagger import parse_openapi

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """``plan`` is None (and ``files`` empty) when there was nothing to generate."""

    plan: TestPlan | None
    files: dict[str, str]

    @property
    def empty(self) -> bool:
        return self.plan is None


def generate(spec_path: Path, options: GenerateOptions | None = None) -> GenerationResult:
    """Generate test files for the API document at ``spec_path``.

    Document errors (SpecError) propagate to the caller.
    """
    options = options or GenerateOptions()
    spec = parse_openapi(spec_path)
    plan = compile_plan(spec, options)
    files = CodeGenerator(templates=options.templates).generate(plan)

    if options.write_to is not None and files:
        write_files(files, options.write_to)

    return GenerationResult(plan=plan, files=files)


def write_files(files: dict[str, str], output: Path) -> list[Path]:
    output.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in files.items():
        file_path = output / filename
        file_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", file_path)
        written.append(file_path)
    return written
