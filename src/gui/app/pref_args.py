"""Command-line overrides for app prefs.

Any recognized pref can be passed as ``--<prefName> value`` or
``--<prefName>=value``. Other arguments are left for the rest of the app.

Values that look like numbers (decimal, exponent or ``0x`` hex) become
numbers. ``true``/``false`` become booleans only in the space-separated form;
``--name=false`` keeps the string. A bare ``--name`` means True.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Any, Dict, Iterable, Sequence, Set

__all__ = ["coerce_arg_value", "parse_pref_args"]

_INT_RE = re.compile(r"^[-+]?\d+$")
_HEX_RE = re.compile(r"^0x[0-9a-f]+$", re.IGNORECASE)
_FLOAT_RE = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


def coerce_arg_value(raw: Any, *, booleans: bool = True) -> Any:
    """Turn a raw argument string into a number, or a boolean if *booleans*."""
    if not isinstance(raw, str):
        return raw
    if booleans and raw in ("true", "false"):
        return raw == "true"
    if _INT_RE.match(raw):
        return int(raw)
    if _HEX_RE.match(raw):
        return int(raw, 16)
    if _FLOAT_RE.match(raw):
        return float(raw)
    return raw


def _build_parser(names: Iterable[str]) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    for name in names:
        # A bare flag means True
        p.add_argument(f"--{name}", dest=name, nargs="?", const=True, default=None)
    return p


def _equals_form_names(names: Sequence[str], args: Sequence[str]) -> Set[str]:
    """Names whose last occurrence in *args* was written ``--name=value``."""
    found: Set[str] = set()
    for arg in args:
        if arg == "--":
            break
        for name in names:
            if arg == f"--{name}":
                found.discard(name)
            elif arg.startswith(f"--{name}="):
                found.add(name)
    return found


def parse_pref_args(
    names: Iterable[str], argv: Sequence[str] | None = None
) -> Dict[str, Any]:
    """Return values given on the command line for the pref *names*.

    Prefs not mentioned in *argv* (default: ``sys.argv[1:]``) are omitted.
    """
    names = list(names)
    args = list(argv) if argv is not None else sys.argv[1:]
    namespace, _unknown = _build_parser(names).parse_known_args(args)
    equals_form = _equals_form_names(names, args)
    values: Dict[str, Any] = {}
    for name in names:
        raw = getattr(namespace, name)
        if raw is not None:
            values[name] = coerce_arg_value(raw, booleans=name not in equals_form)
    return values
