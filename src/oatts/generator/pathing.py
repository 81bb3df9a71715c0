"""Path placeholder substitution."""

import logging
import re
from typing import Any

from oatts.generator.custom_values import NO_VALUE
from oatts.parser.base import Parameter
from oatts.parser.sample import SchemaSampler

logger = logging.getLogger(__name__)

MAX_RESAMPLES = 100


def path_sample(param: Parameter, sampler: SchemaSampler) -> Any:
    """Sample a path parameter value; numeric samples are never negative."""
    sample = param.sample(sampler)
    if not param.is_numeric:
        return sample

    attempts = 0
    while _is_number(sample) and sample < 0:
        if attempts == MAX_RESAMPLES:
            logger.warning("No non-negative sample for path parameter '%s', using %s", param.name, abs(sample))
            return abs(sample)
        sample = param.sample(sampler)
        attempts += 1
    return sample


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def pathify(path: str, param: Parameter, sampler: SchemaSampler, value: Any = NO_VALUE) -> str:
    """Replace the ``{name}`` placeholder of ``param`` in ``path``.

    ``value`` is used verbatim when given, otherwise a sample is generated.
    A name that does not occur in the path leaves it unchanged. All
    whitespace is stripped from the result.
    """
    placeholder = "{" + param.name + "}"
    if placeholder in path:
        if value is NO_VALUE:
            value = path_sample(param, sampler)
        path = path.replace(placeholder, _path_segment(value), 1)
    return re.sub(r"\s+", "", path)


def _path_segment(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
