"""Regex clean-up for JSX produced outside the streaming converter.

The streaming converter already emits React attribute names. This pass exists
for markup that reaches the JSX output without going through the parser,
such as fragments rewritten by earlier string substitutions.
"""

from __future__ import annotations

import re

from html2react.convert.tables import ATTRIBUTE_RENAMES, BOOLEAN_ATTRIBUTES

_EVENT_RE = re.compile(r'(?<=\s)on([a-z]+)="([^"]*)"')
_HYPHENATED_RE = re.compile(r'(?<=\s)([a-z][a-z0-9]*(?:-[a-z0-9]+)+)(?==")')
_CLASS_RE = re.compile(r'(?<=\s)class="')
_BOOLEAN_RE = re.compile(
    r"(?<=\s)(" + "|".join(sorted(BOOLEAN_ATTRIBUTES)) + r')="(true|false)"',
    re.IGNORECASE,
)


def _event_repl(m: re.Match[str]) -> str:
    return f"on{m.group(1).capitalize()}={{() => {{ {m.group(2)} }}}}"


def _hyphen_repl(m: re.Match[str]) -> str:
    name = m.group(1)
    if name.startswith(("data-", "aria-")):
        return name
    renamed = ATTRIBUTE_RENAMES.get(name)
    if renamed is not None:
        return renamed
    head, *rest = name.split("-")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def _boolean_repl(m: re.Match[str]) -> str:
    name = m.group(1).lower()
    return f"{ATTRIBUTE_RENAMES.get(name, name)}={{{m.group(2).lower()}}}"


def normalize_jsx_attributes(jsx: str) -> str:
    """Fix HTML-style attributes left in a JSX string.

    - ``on<event>="code"`` -> ``on<Event>={() => { code }}``
    - hyphenated names (except ``data-*``/``aria-*``) -> camelCase
    - ``class="`` -> ``className="``
    - ``"true"``/``"false"`` on boolean attributes -> ``{true}``/``{false}``
    """

    jsx = _EVENT_RE.sub(_event_repl, jsx)
    jsx = _HYPHENATED_RE.sub(_hyphen_repl, jsx)
    jsx = _CLASS_RE.sub('className="', jsx)
    return _BOOLEAN_RE.sub(_boolean_repl, jsx)


__all__ = ["normalize_jsx_attributes"]
