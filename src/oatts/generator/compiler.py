"""Plan compiler — walks the spec model and assembles the test plan."""

import logging
import re

from oatts.generator.options import GenerateOptions
from oatts.generator.plan import OperationPlan, PathPlan, SpecSummary, TestPlan
from oatts.generator.transaction import build_transaction, wants_status
from oatts.parser.base import ApiSpec, Operation, PathItem
from oatts.parser.sample import SchemaSampler

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost:5000"
DEFAULT_SCHEME = "http"

# Characters not allowed in file names
_UNSAFE_CHARS = re.compile(r'[/?<>\\:*|"\x00-\x1f\x80-\x9f]')


def compile_plan(spec: ApiSpec, options: GenerateOptions | None = None) -> TestPlan | None:
    """Compile the test plan, or return None when there is nothing to generate."""
    options = options or GenerateOptions()
    summary = summarize(spec, options)
    sampler = SchemaSampler(seed=options.seed)

    path_plans = []
    for path_item in select_paths(spec, options):
        path_plan = compile_path(summary, path_item, options, sampler)
        if path_plan is not None:
            path_plans.append(path_plan)

    if not path_plans:
        logger.info("no paths to process in spec")
        return None

    return TestPlan(
        host=summary.host,
        scheme=summary.scheme,
        base_path=summary.base_path,
        consumes=summary.consumes,
        produces=summary.produces,
        paths=path_plans,
    )


def summarize(spec: ApiSpec, options: GenerateOptions) -> SpecSummary:
    """Global values for the compile, option overrides applied."""
    return SpecSummary(
        host=options.host or spec.host or DEFAULT_HOST,
        scheme=options.scheme or (spec.schemes[0] if spec.schemes else DEFAULT_SCHEME),
        base_path=spec.base_path or "",
        consumes=spec.consumes,
        produces=spec.produces,
    )


def select_paths(spec: ApiSpec, options: GenerateOptions) -> list[PathItem]:
    """Requested paths (unknown names skipped) or all paths, narrowed by status codes."""
    if options.paths is not None:
        selected = [spec.get_path(p) for p in options.paths]
        selected = [item for item in selected if item is not None]
    else:
        selected = list(spec.paths)

    if options.status_codes is not None:
        selected = [item for item in selected if any(_exposes_status(op, options) for op in item.operations)]
    return selected


def path_name(path: str) -> str:
    """File-name-safe name for a path, e.g. '/pet/{petId}' -> 'pet-{petId}'."""
    return _UNSAFE_CHARS.sub("-", path)[1:]


def compile_path(
    summary: SpecSummary, path_item: PathItem, options: GenerateOptions, sampler: SchemaSampler
) -> PathPlan | None:
    operations = []
    for operation in path_item.operations:
        op_plan = compile_operation(summary, path_item, operation, options, sampler)
        if op_plan is not None:
            operations.append(op_plan)

    if not operations:
        logger.debug("Skipping %s: no transactions", path_item.path)
        return None
    return PathPlan(name=path_name(path_item.path), description=f"tests for {path_item.path}", operations=operations)


def compile_operation(
    summary: SpecSummary,
    path_item: PathItem,
    operation: Operation,
    options: GenerateOptions,
    sampler: SchemaSampler,
) -> OperationPlan | None:
    transactions = []
    for response in operation.responses:
        transaction = build_transaction(summary, path_item, operation, response, options, sampler)
        if transaction is not None:
            transactions.append(transaction)

    if not transactions:
        return None
    logger.debug("%s %s: %d transactions", operation.method.upper(), path_item.path, len(transactions))
    return OperationPlan(description=operation_description(operation), transactions=transactions)


def operation_description(operation: Operation) -> str:
    """E.g. 'tests for post: Add a new pet to the store', on a single line."""
    description = f"tests for {operation.method}"
    summary = " ".join(operation.summary.split())
    if summary:
        description += f": {summary}"
    return description


def _exposes_status(operation: Operation, options: GenerateOptions) -> bool:
    return any(wants_status(code, options) for code in operation.status_codes())
