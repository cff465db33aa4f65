# =============================================================================
# signaturit/arguments.py  —  Argument Extraction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the untyped argument bag of a tool call ({"contact_id": "abc", ...})
#   into typed values, BEFORE any HTTP request is built.
#
#   get_argument      → one key, one kind ("string" | "number"), with default
#   decode_arguments  → a whole bag into a per-operation parameter model
#   split_templates   → "tpl1,tpl2" into ["tpl1", "tpl2"]
#   parse_recipients  → '[{"name": ..., "email": ...}]' into [Recipient, ...]
#
# An absent key and a key explicitly set to None are treated the same way.
# =============================================================================

from typing import Any, Literal, Mapping, TypeVar, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from signaturit.errors import ArgumentError
from signaturit.models import Recipient, ToolParams

P = TypeVar("P", bound=ToolParams)

_KINDS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "number": (int, float),
}

_RECIPIENTS = TypeAdapter(list[Recipient])


def get_argument(
    bag: Mapping[str, Any],
    key: str,
    kind: str,
    required: bool = False,
    default: Any = None,
) -> Any:
    """Pull one typed value out of an argument bag.

    Args:
        bag: The tool call's arguments.
        key: Argument name.
        kind: "string" or "number".  Booleans are never accepted as numbers.
        required: Fail when the key is absent instead of using ``default``.
        default: Returned when an optional key is absent.

    Raises:
        ArgumentError: reason "missing" or "wrong_type".
    """
    value = bag.get(key)
    if value is None:
        if required:
            raise ArgumentError(key, "missing")
        return default
    if isinstance(value, bool) or not isinstance(value, _KINDS[kind]):
        raise ArgumentError(key, "wrong_type", f"expected {kind}, got {type(value).__name__}")
    return value


def _kind_for(annotation: Any) -> str:
    candidates = get_args(annotation) or (annotation,)
    for candidate in candidates:
        if candidate is str or get_origin(candidate) is Literal:
            return "string"
    return "number"


def decode_arguments(params_cls: type[P], bag: Mapping[str, Any]) -> P:
    """Decode an argument bag into ``params_cls``.

    Each field of the parameter model is extracted with get_argument (its
    annotation picks the kind, its default makes it optional).  The
    collected values are then validated by the model itself, which catches
    values outside an allowed set (e.g. delivery_type="fax").
    """
    values: dict[str, Any] = {}
    for name, info in params_cls.model_fields.items():
        required = info.is_required()
        values[name] = get_argument(
            bag,
            name,
            _kind_for(info.annotation),
            required=required,
            default=None if required else info.default,
        )

    try:
        return params_cls.model_validate(values)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise ArgumentError(str(error["loc"][0]), "invalid_value", error["msg"]) from exc


def split_templates(raw: str, trim: bool = False) -> list[str]:
    """Split a comma-separated template list.

    By default this is a literal split: whitespace is kept and empty
    segments are forwarded as empty strings.  With ``trim`` each segment is
    stripped and empty ones are dropped.
    """
    segments = raw.split(",")
    if not trim:
        return segments

    templates = [segment.strip() for segment in segments if segment.strip()]
    if not templates:
        raise ArgumentError("templates", "missing", "no template IDs after trimming")
    return templates


def parse_recipients(raw: str) -> list[Recipient]:
    """Parse a JSON array of {"name", "email"} objects, keeping their order."""
    try:
        return _RECIPIENTS.validate_json(raw)
    except ValidationError as exc:
        raise ArgumentError("recipients", "invalid_json", exc.errors()[0]["msg"]) from exc
