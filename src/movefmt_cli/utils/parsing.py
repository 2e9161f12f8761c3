"""
Command-line value parsing utilities.

Provides parsing of ``key=value`` override lists as accepted by the
``--config`` flag.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional


def parse_config_overrides(values: Optional[Iterable[str]]) -> Dict[str, str]:
	"""
	Parse ``--config`` occurrences into an override mapping.

	Each occurrence holds one or more ``key=value`` pairs separated by
	commas. Whitespace around keys and values is trimmed and a trailing
	comma is ignored; any other empty pair is rejected. When a key
	repeats, the last value wins.

	Parameters:
		values: Raw flag values, one per ``--config`` occurrence.

	Returns:
		Mapping of override keys to values.

	Raises:
		ValueError: If a pair is missing ``=`` or has an empty side,
			or a pair is empty.
	"""
	overrides: Dict[str, str] = {}
	for raw in values or []:
		pairs = raw.split(",")
		# only a single trailing separator is tolerated
		if pairs[-1] == "":
			pairs.pop()
		for pair in pairs:
			key, sep, value = pair.partition("=")
			key, value = key.strip(), value.strip()
			if not sep or not key or not value:
				raise ValueError(
				    f"Invalid pair '{pair.strip()}', expected 'key=value'")
			overrides[key] = value
	return overrides


__all__ = ["parse_config_overrides"]
