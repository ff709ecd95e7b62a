"""Placeholder interpolation for paths, query strings and payloads.

Templates use ``{{key}}`` placeholders. Callers usually pass only a subset of
the parameters a template knows about, so an unresolved placeholder is never
an error:

- in paths it is left as-is
- in query strings the whole ``key=value`` fragment is dropped
- in payloads the whole top-level member is dropped

Example:
    ```python
    object_to_query_string({"a": "{{x}}", "b": "{{y}}"}, {"x": "v"})
    # 'a=v'
    interpolate_object({"name": "{{name}}", "age": "{{age}}"}, {"name": "Ana"})
    # '{"name":"Ana"}'
    ```
"""

import json
import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\{\{[^{}]+\}\}")


def _placeholder(key: str) -> str:
    return "{{" + str(key) + "}}"


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, dict, list, tuple)):
        return _to_json(value)
    return str(value)


def has_placeholder(text: str) -> bool:
    """Return True if ``text`` still contains a ``{{...}}`` placeholder."""
    return PLACEHOLDER_PATTERN.search(text) is not None


def interpolate_string(template: str, params: Mapping[str, Any] | None) -> str:
    """Replace every ``{{key}}`` in ``template`` with the matching param value.

    Placeholders without a matching param are left intact.
    """
    if not params:
        return template
    for key, value in params.items():
        template = template.replace(_placeholder(key), _to_text(value))
    return template


def _render(template: Any, params: Mapping[str, Any]) -> Any:
    if isinstance(template, str):
        key = template[2:-2]
        if PLACEHOLDER_PATTERN.fullmatch(template) and key in params:
            return params[key]
        return interpolate_string(template, params)
    if isinstance(template, Mapping):
        return {interpolate_string(str(k), params): _render(v, params) for k, v in template.items()}
    if isinstance(template, (list, tuple)):
        return [_render(item, params) for item in template]
    return template


def _has_unresolved(template: Any, params: Mapping[str, Any]) -> bool:
    return any(match.group()[2:-2] not in params for match in PLACEHOLDER_PATTERN.finditer(_to_json(template)))


def interpolate_object(template: Any, params: Mapping[str, Any] | None) -> str | None:
    """Render a payload template into a JSON string.

    Placeholders are substituted inside string values and object keys. A
    value whose whole string is one placeholder takes the param value with
    its type, so ``"{{ids}}"`` with ``[1, 2]`` becomes ``[1,2]``.

    A top-level member (or array item) whose template holds a placeholder
    without a matching param is removed as a whole, however deeply the
    placeholder is nested. Param values are inserted as data: a value that
    itself contains ``{{...}}`` text is kept as-is and never re-substituted.

    Returns:
        The serialized payload, or None when there is no template.
    """
    if template is None:
        return None
    params = params or {}

    if isinstance(template, Mapping):
        template = {k: v for k, v in template.items() if not _has_unresolved({k: v}, params)}
    elif isinstance(template, (list, tuple)):
        template = [item for item in template if not _has_unresolved(item, params)]
    return _to_json(_render(template, params))


def remove_empty_placeholders(query_string: str) -> str:
    """Drop ``key={{placeholder}}`` fragments that were never substituted.

    Separators left behind (leading, trailing or doubled ``&``) are removed too.
    """
    fragments = query_string.split("&")
    return "&".join(f for f in fragments if f and not has_placeholder(f))


def object_to_query_string(template: Mapping[str, Any], params: Mapping[str, Any] | None) -> str:
    """Build a query string from a ``{query_key: templated_value}`` mapping.

    Keys keep their declaration order. Fragments whose value could not be
    resolved are left out.
    """
    query_string = ""
    for key, value in template.items():
        interpolated = interpolate_string(_to_text(value), params)
        query_string = f"{query_string}{'&' if query_string else ''}{key}={interpolated}"
        query_string = remove_empty_placeholders(query_string)
    return query_string


def normalize_path(path: str | None) -> str:
    """Normalize a method path to ``/segment/...`` without a trailing slash.

    Empty or blank paths become ``/``.
    """
    if path is None or not path.strip():
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"
