"""Content-Type / Accept negotiation for generated requests."""

CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"


def negotiate(desired: str | None, declared: list[str] | None, global_types: list[str]) -> str | None:
    """Pick one media type, or None when the header should be omitted.

    ``declared`` is the operation's own list (None when the operation
    declares none); when present it fully shadows ``global_types``. A
    desired type is only honoured if the effective list contains it,
    otherwise the effective list's first entry is used.
    """
    effective = declared if declared is not None else global_types
    if desired is not None and desired in effective:
        return desired
    return effective[0] if effective else None


def content_headers(
    consumes: str | None,
    produces: str | None,
    op_consumes: list[str] | None,
    op_produces: list[str] | None,
    global_consumes: list[str],
    global_produces: list[str],
) -> dict[str, str]:
    """Negotiated Content-Type and Accept headers, omitting undeterminable ones."""
    headers = {}
    content_type = negotiate(consumes, op_consumes, global_consumes)
    if content_type is not None:
        headers[CONTENT_TYPE] = content_type
    accept = negotiate(produces, op_produces, global_produces)
    if accept is not None:
        headers[ACCEPT] = accept
    return headers
