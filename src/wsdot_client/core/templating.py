from __future__ import annotations

import re
from datetime import date
from typing import Any, List, Mapping, Optional

from ..utils.dates import format_date
from .errors import TemplateMismatchError

PLACEHOLDER_RE = re.compile(r"\{[^}]+\}")


def find_placeholders(template: str) -> List[str]:
    """Return the "{name}" tokens of a template, in order of appearance."""
    return PLACEHOLDER_RE.findall(template)


def placeholder_names(template: str) -> List[str]:
    return [p[1:-1] for p in find_placeholders(template)]


def stringify_param(value: Any) -> str:
    # datetime is a date subclass; both render from their own calendar fields
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def interpolate_params(
    template: str, params: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Substitute "{key}" placeholders with stringified parameter values.

    - Absent or empty params return the template unchanged
    - A key without a matching placeholder raises TemplateMismatchError
    - Only the first occurrence of a repeated placeholder is replaced
    """
    if not params:
        return template

    available = find_placeholders(template)
    endpoint = template
    for key, value in params.items():
        placeholder = f"{{{key}}}"
        if placeholder not in endpoint:
            raise TemplateMismatchError(
                f'Parameter "{key}" was provided but placeholder "{placeholder}" '
                f"not found in endpoint template {template!r}. "
                f"Available placeholders: {', '.join(available) or 'none'}",
                template=template,
                key=key,
                placeholders=available,
            )
        endpoint = endpoint.replace(placeholder, stringify_param(value), 1)
    return endpoint


__all__ = [
    "PLACEHOLDER_RE",
    "find_placeholders",
    "placeholder_names",
    "stringify_param",
    "interpolate_params",
]
