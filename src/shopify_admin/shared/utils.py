"""Utility functions for building Shopify requests."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel


QueryOptions = Optional[Union[BaseModel, Mapping[str, Any]]]


def encode_query_value(value: Any) -> str:
    """Encode a single query value the way the Admin API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (set, frozenset)):
        value = sorted(value)
    if isinstance(value, (list, tuple)):
        return ",".join(encode_query_value(v) for v in value)
    return str(value)


def build_query_params(options: QueryOptions) -> Dict[str, str]:
    """Turn an options model or mapping into query parameters.

    Unset values are dropped; everything else is passed through unchanged
    apart from string encoding.
    """
    if options is None:
        return {}

    if isinstance(options, BaseModel):
        raw = options.model_dump(exclude_none=True, by_alias=True)
    else:
        raw = dict(options)

    return {
        key: encode_query_value(value)
        for key, value in raw.items()
        if value is not None
    }


def dump_payload(model: BaseModel) -> Dict[str, Any]:
    """Serialize a model for a request body, omitting unset fields."""
    return model.model_dump(mode="json", exclude_none=True, by_alias=True)
