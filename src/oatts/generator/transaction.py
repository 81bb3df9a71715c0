"""Transaction builder — one request/expected-response pairing per declared response."""

import logging
import re
from typing import Any

from oatts.generator.custom_values import (
    NO_VALUE,
    Scope,
    find_custom_headers,
    find_custom_response,
    find_custom_value,
)
from oatts.generator.negotiation import content_headers
from oatts.generator.options import GenerateOptions
from oatts.generator.pathing import pathify
from oatts.generator.plan import ExpectedResponse, SpecSummary, Transaction
from oatts.parser.base import Operation, Parameter, PathItem, Response
from oatts.parser.sample import SchemaSampler

logger = logging.getLogger(__name__)

FILE_UPLOAD_PLACEHOLDER = "{fileUpload}"


def wants_status(status_code: str, options: GenerateOptions) -> bool:
    return options.status_codes is None or status_code in options.status_codes


def build_transaction(
    summary: SpecSummary,
    path_item: PathItem,
    operation: Operation,
    response: Response,
    options: GenerateOptions,
    sampler: SchemaSampler,
) -> Transaction | None:
    """Build the transaction for one response, or None if its status code is filtered out."""
    if not wants_status(response.status_code, options):
        return None

    table = options.custom_values
    scope = Scope(path_item.path, operation.method, response.status_code)

    body: Any = {}
    query: dict = {}
    form_data: dict = {}
    param_headers: dict = {}
    path = path_item.path

    for param in operation.parameters:
        custom = find_custom_value(table, param.location, param.name, scope)
        if param.location == "path":
            path = pathify(path, param, sampler, custom)
            continue

        value = custom if custom is not NO_VALUE else _sample(param, sampler)
        if param.location == "body":
            body = value
        elif param.location == "query":
            query[param.name] = value
        elif param.location == "formData":
            form_data[param.name] = value
        elif param.location == "header":
            param_headers[param.name] = value

    # path-level parameters the operation did not redeclare
    for param in path_item.parameters:
        if param.location == "path":
            path = pathify(path, param, sampler, find_custom_value(table, "path", param.name, scope))

    headers = content_headers(
        options.consumes,
        options.produces,
        operation.consumes,
        operation.produces,
        summary.consumes,
        summary.produces,
    )
    headers.update(param_headers)
    headers.update(find_custom_headers(table, scope))

    expected = _expected_response(response, scope, options, sampler)

    return Transaction(
        description=_describe(response),
        scheme=summary.scheme,
        host=summary.host,
        path=re.sub(r"\s+", "", summary.base_path.rstrip("/") + path),
        method=operation.method.lower(),
        body=body,
        query=query,
        form_data=form_data,
        headers=headers,
        expected=expected,
        has_value=expected.custom or (options.samples and expected.res is not None),
    )


def _sample(param: Parameter, sampler: SchemaSampler) -> Any:
    if not param.can_sample:
        # file fields have no representative value
        logger.debug("Using placeholder for %s parameter '%s'", param.location, param.name)
        return FILE_UPLOAD_PLACEHOLDER
    return param.sample(sampler)


def _expected_response(
    response: Response, scope: Scope, options: GenerateOptions, sampler: SchemaSampler
) -> ExpectedResponse:
    custom = find_custom_response(options.custom_values, scope)
    if custom is not NO_VALUE:
        return ExpectedResponse(status_code=response.status_code, res=custom, custom=True)
    if options.samples:
        return ExpectedResponse(status_code=response.status_code, res=response.sample(sampler))
    return ExpectedResponse(status_code=response.status_code, res=response.schema_)


def _describe(response: Response) -> str:
    description = re.sub(r"\s*\n\s*", " ", response.description.strip())
    return f'should respond {response.status_code} for "{description}"'
