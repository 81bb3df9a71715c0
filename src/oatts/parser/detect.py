"""Load API documents and detect their OpenAPI version."""

from pathlib import Path

import yaml

from oatts.errors import SpecError


def load_document(file_path: Path) -> dict:
    """Read a YAML or JSON API document into a dict."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecError(f"cannot read document: {e}", source=str(file_path)) from e

    # YAML is a superset of JSON, so one loader covers both
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SpecError(f"cannot parse document: {e}", source=str(file_path)) from e

    if not isinstance(doc, dict):
        raise SpecError("document is not a mapping", source=str(file_path))
    return doc


def detect_version(doc: dict) -> str:
    """Detect the document flavour.

    Returns: 'swagger2' or 'openapi3'.
    """
    if str(doc.get("swagger", "")).startswith("2"):
        return "swagger2"
    if str(doc.get("openapi", "")).startswith("3"):
        return "openapi3"
    raise SpecError("not a Swagger 2.0 or OpenAPI 3.x document")
