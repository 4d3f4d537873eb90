"""
Filter mapping -> query string serialization.

Filters arrive as flat mappings of name -> value. None values and empty
lists are dropped, booleans become "true"/"false", and lists are expanded
into repeated keys unless the caller names them in ``comma_joined``.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from typing import Any, Union
from urllib.parse import urlencode

QueryParams = Sequence[tuple[str, str]]
QueryInput = Union[QueryParams, Mapping[str, Any], None]


def _to_str(value: Any) -> str:
  if isinstance(value, bool):
    return "true" if value else "false"
  return str(value)


def filters_to_params(
  filters: Mapping[str, Any],
  comma_joined: Collection[str] = (),
) -> list[tuple[str, str]]:
  """Convert a filter mapping into ordered (key, value) query pairs.

  Args:
    filters: Flat mapping of filter name to value. Values may be None,
      str, int, float, bool, or a list/tuple of those.
    comma_joined: Keys whose list values are sent as one comma-separated
      value (``key=a,b``) instead of one entry per element (``key=a&key=b``).

  Returns:
    List of (key, value) pairs in the mapping's insertion order.
  """
  pairs: list[tuple[str, str]] = []
  for key, value in filters.items():
    if value is None:
      continue
    if isinstance(value, (list, tuple)):
      items = [_to_str(v) for v in value if v is not None]
      if not items:
        continue
      if key in comma_joined:
        pairs.append((key, ",".join(items)))
      else:
        pairs.extend((key, item) for item in items)
      continue
    pairs.append((key, _to_str(value)))
  return pairs


def normalize_query(query: QueryInput) -> list[tuple[str, str]]:
  """Accept query params as pairs or as a plain mapping."""
  if not query:
    return []
  if isinstance(query, Mapping):
    return filters_to_params(query)
  return [(str(k), _to_str(v)) for k, v in query]


def encode_query(query: QueryInput) -> str:
  """URL-encode query params (form encoding, ``,`` -> ``%2C``)."""
  return urlencode(normalize_query(query))
