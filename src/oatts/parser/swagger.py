"""OpenAPI / Swagger document parser.

Parses Swagger 2.0 and OpenAPI 3.x documents into the ApiSpec model.
OpenAPI 3.x documents are normalised to the Swagger 2.0 shape: request
bodies become ``body`` or ``formData`` parameters and media types become
``consumes``/``produces`` lists.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from oatts.errors import SpecError
from oatts.parser.base import ApiSpec, Operation, Parameter, PathItem, Response
from oatts.parser.detect import detect_version, load_document

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# Keys of a Swagger 2.0 non-body parameter that are not part of its schema
_PARAM_META_KEYS = ("name", "in", "description", "required", "collectionFormat", "allowEmptyValue")


def parse_openapi(file_path: Path) -> ApiSpec:
    """Parse an OpenAPI/Swagger file into an ApiSpec."""
    doc = load_document(file_path)
    try:
        return parse_document(doc)
    except SpecError as e:
        raise SpecError(str(e), source=str(file_path)) from e


def parse_document(doc: dict) -> ApiSpec:
    """Parse an already loaded document into an ApiSpec."""
    version = detect_version(doc)
    paths = resolve_refs(doc.get("paths") or {}, doc)
    if not isinstance(paths, dict):
        raise SpecError("'paths' is not a mapping")

    if version == "swagger2":
        spec = ApiSpec(
            host=doc.get("host"),
            base_path=doc.get("basePath", ""),
            schemes=doc.get("schemes", []),
            consumes=doc.get("consumes", []),
            produces=doc.get("produces", []),
            paths=[_parse_path(path, item, _parse_swagger2_operation) for path, item in paths.items()],
        )
    else:
        scheme, host, base_path = _parse_servers(doc.get("servers", []))
        spec = ApiSpec(
            host=host,
            base_path=base_path,
            schemes=[scheme] if scheme else [],
            paths=[_parse_path(path, item, _parse_openapi3_operation) for path, item in paths.items()],
        )

    logger.debug("Parsed %s document with %d paths", version, len(spec.paths))
    return spec


# -- $ref resolution ----------------------------------------------------------


def resolve_refs(node, doc: dict, seen: frozenset = frozenset()):
    """Inline local $ref pointers. A circular reference resolves to {}."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str):
            if ref in seen:
                return {}
            return resolve_refs(_follow_ref(ref, doc), doc, seen | {ref})
        return {key: resolve_refs(value, doc, seen) for key, value in node.items()}
    if isinstance(node, list):
        return [resolve_refs(item, doc, seen) for item in node]
    return node


def _follow_ref(ref: str, doc: dict):
    if not ref.startswith("#/"):
        raise SpecError(f"only local references are supported: {ref}")
    target = doc
    for token in ref[2:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if not isinstance(target, dict) or token not in target:
            raise SpecError(f"unresolvable reference: {ref}")
        target = target[token]
    return target


# -- shared -------------------------------------------------------------------


def _parse_path(path: str, item: dict, parse_operation) -> PathItem:
    path_params = [_parse_parameter(p) for p in item.get("parameters", [])]
    operations = []
    for method, operation in item.items():
        if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
            continue
        operations.append(parse_operation(method.lower(), operation, path_params))
    return PathItem(path=path, parameters=path_params, operations=operations)


def _merge_parameters(path_params: list[Parameter], op_params: list[Parameter]) -> list[Parameter]:
    merged = {(p.name, p.location): p for p in path_params}
    for p in op_params:
        merged[(p.name, p.location)] = p
    return list(merged.values())


def _parse_parameter(p: dict) -> Parameter:
    location = p.get("in", "query")
    if "schema" in p:
        schema = dict(p["schema"])
        if "example" in p and "example" not in schema:
            schema["example"] = p["example"]
        param_type = schema.get("type", "object" if location == "body" else "string")
    else:
        schema = {k: v for k, v in p.items() if k not in _PARAM_META_KEYS}
        param_type = p.get("type", "string")

    return Parameter(
        name=p["name"],
        location=location,
        required=p.get("required", False),
        param_type=param_type,
        description=p.get("description", ""),
        schema=schema,
    )


# -- Swagger 2.0 --------------------------------------------------------------


def _parse_swagger2_operation(method: str, operation: dict, path_params: list[Parameter]) -> Operation:
    op_params = [_parse_parameter(p) for p in operation.get("parameters", [])]
    responses = [
        Response(status_code=str(code), description=res.get("description", ""), schema=res.get("schema"))
        for code, res in (operation.get("responses") or {}).items()
    ]
    return Operation(
        method=method,
        summary=operation.get("summary", ""),
        parameters=_merge_parameters(path_params, op_params),
        consumes=operation.get("consumes"),
        produces=operation.get("produces"),
        responses=responses,
    )


# -- OpenAPI 3.x --------------------------------------------------------------


def _parse_servers(servers: list[dict]) -> tuple[str | None, str | None, str]:
    if not servers:
        return None, None, ""
    parsed = urlparse(servers[0].get("url", ""))
    return parsed.scheme or None, parsed.netloc or None, parsed.path.rstrip("/")


def _parse_openapi3_operation(method: str, operation: dict, path_params: list[Parameter]) -> Operation:
    op_params = [_parse_parameter(p) for p in operation.get("parameters", [])]
    consumes = None

    body = operation.get("requestBody")
    if body:
        content = body.get("content", {})
        consumes = list(content)
        op_params.extend(_request_body_parameters(operation, body, content))

    responses = []
    produces: list[str] = []
    for code, res in (operation.get("responses") or {}).items():
        content = res.get("content") or {}
        schema = None
        for media_type, media in content.items():
            if media_type not in produces:
                produces.append(media_type)
            if schema is None:
                schema = media.get("schema")
        responses.append(Response(status_code=str(code), description=res.get("description", ""), schema=schema))

    return Operation(
        method=method,
        summary=operation.get("summary", ""),
        parameters=_merge_parameters(path_params, op_params),
        consumes=consumes,
        produces=produces or None,
        responses=responses,
    )


def _request_body_parameters(operation: dict, body: dict, content: dict) -> list[Parameter]:
    if not content:
        return []
    media_type, media = next(iter(content.items()))
    schema = media.get("schema", {})

    if media_type in FORM_MEDIA_TYPES:
        required = set(schema.get("required", []))
        return [
            Parameter(
                name=name,
                location="formData",
                required=name in required,
                param_type=prop.get("type", "string"),
                description=prop.get("description", ""),
                schema=prop,
            )
            for name, prop in schema.get("properties", {}).items()
        ]

    return [
        Parameter(
            name=operation.get("x-codegen-request-body-name", "body"),
            location="body",
            required=body.get("required", False),
            param_type=schema.get("type", "object"),
            description=body.get("description", ""),
            schema=schema,
        )
    ]
