"""Decode and encode a small contact document in JSON."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Mapping

SAMPLE_JSON = """{
\t"name": "Gopher",
\t"title": "programmer",
\t"contact": {
\t\t"home": "[phone]",
\t\t"cell": "[phone]"
\t}
}"""

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Contact:
    """Telephone numbers of a person."""

    home: str = ""
    cell: str = ""

    def __str__(self) -> str:
        return f"{{{self.home} {self.cell}}}"


@dataclass
class Info:
    """A person's name, job title and contact numbers."""

    name: str = ""
    title: str = ""
    contact: Contact = field(default_factory=Contact)

    def __str__(self) -> str:
        return f"{{{self.name} {self.title} {self.contact}}}"


def _lookup(obj: Mapping[str, Any], key: str) -> Any:
    if key in obj:
        return obj[key]
    for name, value in obj.items():
        if name.casefold() == key.casefold():
            return value
    return None


def _string(obj: Mapping[str, Any], key: str) -> str:
    value = _lookup(obj, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {key} of type string")
    return value


def _object(value: Any, what: str) -> Mapping[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into {what}")
    return value


def parse_info(text: str | bytes) -> Info:
    """Decode ``text`` into an :class:`Info`; absent fields stay empty."""
    document = _object(json.loads(text), "Info")
    if document is None:
        return Info()
    contact = _object(_lookup(document, "contact"), "field contact")
    return Info(
        name=_string(document, "name"),
        title=_string(document, "title"),
        contact=Contact(
            home=_string(contact, "home"), cell=_string(contact, "cell")
        )
        if contact is not None
        else Contact(),
    )


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Mapping):
        return {str(key): _plain(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def info_to_json(info: Any, prefix: str = "", indent: str = "    ") -> str:
    """Encode ``info`` as indented JSON.

    Dataclass fields keep their declared order; mapping keys are sorted.
    Every line after the first begins with ``prefix``.
    """
    text = json.dumps(_plain(info), indent=indent, ensure_ascii=False)
    for char, escape in _ESCAPES.items():
        text = text.replace(char, escape)
    first, *rest = text.split("\n")
    return first + "".join(f"\n{prefix}{line}" for line in rest)


def main(argv: list[str] | None = None) -> int:
    """Decode the sample document two ways, then encode it again."""
    argparse.ArgumentParser(description="Decode and encode contact JSON.").parse_args(argv)

    try:
        info = parse_info(SAMPLE_JSON)
    except ValueError as exc:
        print("ERROR:", exc)
        return 1
    print(info)

    document = json.loads(SAMPLE_JSON)
    print("Name:", document["name"])
    print("Title:", document["title"])
    print("Contact")
    print("Home:", document["contact"]["home"])
    print("Cell:", document["contact"]["cell"])

    print(info_to_json(document, "-", "    "))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())