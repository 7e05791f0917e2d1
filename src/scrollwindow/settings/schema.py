"""Schema helpers for :class:`~scrollwindow.domain.models.WindowConfig`."""

from __future__ import annotations

from enum import Enum
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .. import config as _config
from ..domain.models import WindowConfig
from ..errors import ConfigurationError

_NUMBER = {"type": "number"}

CONFIG_SCHEMA: dict[str, Any] = {
    "$id": "scrollwindow/window-config.schema.json",
    "type": "object",
    "required": ["item_count", "axis", "overscan_count"],
    "properties": {
        "item_count": {"type": "integer", "minimum": 0},
        "axis": {"enum": ["vertical", "horizontal"]},
        "height": {"type": ["number", "string", "null"]},
        "width": {"type": ["number", "string", "null"]},
        "overscan_count": {"type": "integer", "minimum": 0},
        "use_adjusted_offsets": {"type": "boolean"},
        "use_is_scrolling": {"type": "boolean"},
        "initial_scroll_offset": _NUMBER,
        "estimated_item_size": {"type": "number", "exclusiveMinimum": 0},
    },
    "allOf": [
        {
            "if": {"properties": {"axis": {"const": "vertical"}}},
            "then": {"properties": {"height": _NUMBER}, "required": ["height"]},
        },
        {
            "if": {"properties": {"axis": {"const": "horizontal"}}},
            "then": {"properties": {"width": _NUMBER}, "required": ["width"]},
        },
    ],
}

_validator = Draft202012Validator(CONFIG_SCHEMA)

_MESSAGES = {
    "axis": 'An invalid "axis" has been specified. Value should be either '
    '"horizontal" or "vertical". "{value}" was specified.',
    "height": 'An invalid "height" has been specified. Vertical windows must '
    'specify a number for height. "{value}" was specified.',
    "width": 'An invalid "width" has been specified. Horizontal windows must '
    'specify a number for width. "{value}" was specified.',
}


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float, str)):
        return value
    # Anything else (callables, objects) is not representable in the schema
    # and fails the type checks with a readable message.
    return repr(value)


def config_payload(config: WindowConfig) -> dict[str, Any]:
    """Return the JSON-representable fields of *config*.

    ``None`` values are dropped so that a missing viewport extent is
    reported as missing rather than as a type mismatch.
    """

    payload = {
        "item_count": config.item_count,
        "axis": config.axis,
        "height": config.height,
        "width": config.width,
        "overscan_count": config.overscan_count,
        "use_adjusted_offsets": config.use_adjusted_offsets,
        "use_is_scrolling": config.use_is_scrolling,
        "initial_scroll_offset": config.initial_scroll_offset,
        "estimated_item_size": config.estimated_item_size,
    }
    return {key: _plain(value) for key, value in payload.items() if value is not None}


def _describe(field_name: str, value: Any) -> str:
    if value is None:
        return "null"
    if field_name == "axis":
        return str(_plain(value))
    return type(value).__name__


def validate_config(config: WindowConfig) -> None:
    """Validate the layout-independent parts of *config*.

    Raises :class:`ConfigurationError` on the first problem found.  Does
    nothing when validation is disabled for production use.
    """

    if not _config.VALIDATION_ENABLED:
        return

    payload = config_payload(config)
    error = best_match(_validator.iter_errors(payload))
    if error is not None:
        field_name = error.absolute_path[0] if error.absolute_path else _missing_field(error.message)
        template = _MESSAGES.get(str(field_name))
        if template is not None:
            raise ConfigurationError(template.format(value=_describe(str(field_name), getattr(config, str(field_name), None))))
        raise ConfigurationError(f'An invalid "{field_name}" has been specified: {error.message}')

    if config.render_item is not None and not callable(config.render_item):
        raise ConfigurationError(
            'An invalid "render_item" has been specified. Value should be a '
            f'function that renders an item. "{type(config.render_item).__name__}" was specified.'
        )
    if not callable(config.item_key):
        raise ConfigurationError('An invalid "item_key" has been specified. Value should be a function.')


def _missing_field(message: str) -> str:
    # "'height' is a required property"
    if message.startswith("'") and "'" in message[1:]:
        return message[1 : message.index("'", 1)]
    return "config"


__all__ = ["CONFIG_SCHEMA", "config_payload", "validate_config"]
