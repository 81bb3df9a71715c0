"""Generation options and custom values loading."""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

from oatts.errors import OptionsError


class GenerateOptions(BaseModel):
    """Immutable options threaded through plan compilation and rendering."""

    model_config = ConfigDict(frozen=True)

    host: str | None = None
    scheme: str | None = None
    paths: tuple[str, ...] | None = None
    status_codes: tuple[str, ...] | None = None
    samples: bool = False
    consumes: str | None = None
    produces: str | None = None
    custom_values: dict = {}
    templates: Path | None = None
    write_to: Path | None = None
    seed: int | None = None


def load_custom_values(inline: str | None = None, file_path: Path | None = None) -> dict:
    """Load the custom values table from an inline JSON string and/or a file.

    Top-level keys from the inline string take precedence over the file's.
    """
    from_file: dict = {}
    if file_path is not None:
        try:
            from_file = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise OptionsError(f"cannot load custom values file {file_path}: {e}") from e
        if not isinstance(from_file, dict):
            raise OptionsError(f"custom values file {file_path} must contain a mapping")

    from_inline: dict = {}
    if inline:
        try:
            from_inline = json.loads(inline)
        except json.JSONDecodeError as e:
            raise OptionsError(f"custom values are not valid JSON: {e}") from e
        if not isinstance(from_inline, dict):
            raise OptionsError("custom values must be a JSON object")

    return {**from_file, **from_inline}
