from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Type, Union

import yaml


@dataclass(frozen=True, slots=True)
class Book:
    title: str
    author: str


@dataclass(frozen=True, slots=True)
class Movie:
    title: str
    director: str


@dataclass(frozen=True, slots=True)
class Audiobook:
    title: str


Media = Union[Book, Movie, Audiobook]

MEDIA_KINDS: Dict[str, Type[Any]] = {
    "book": Book,
    "movie": Movie,
    "audiobook": Audiobook,
}

SAMPLE_CATALOG: List[Dict[str, str]] = [
    {"kind": "movie", "title": "Good Movie", "director": "Famous Director"},
    {"kind": "audiobook", "title": "Cool Audiobook"},
    {"kind": "book", "title": "Bad Book", "author": "Unknown"},
]


def render(media: Media) -> str:
    """
    Multi-line dump of the variant tag and every field, e.g.

        Book {
            title: "Bad Book",
            author: "Unknown",
        }
    """
    if type(media) not in MEDIA_KINDS.values():
        raise TypeError(f"Not a media variant: {type(media).__name__}")

    lines = [f"{type(media).__name__} {{"]
    for f in fields(media):
        lines.append(f"    {f.name}: {_quote(getattr(media, f.name))},")
    lines.append("}")
    return "\n".join(lines)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def print_media(media: Media) -> None:
    print(render(media))


def media_from_dict(data: Dict[str, Any]) -> Media:
    if not isinstance(data, dict):
        raise ValueError(f"Media entry must be a mapping, got {data!r}")
    kind = str(data.get("kind", "")).lower()
    cls = MEDIA_KINDS.get(kind)
    if cls is None:
        raise ValueError(f"Unknown media kind: {data.get('kind')!r}")

    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise ValueError(f"{cls.__name__} field names must be strings, got {bad_keys!r}")

    wanted = {f.name for f in fields(cls)}
    given = {k for k in data if k != "kind"}
    missing = wanted - given
    if missing:
        raise ValueError(f"{cls.__name__} is missing field(s): {', '.join(sorted(missing))}")
    extra = given - wanted
    if extra:
        raise ValueError(f"{cls.__name__} has no field(s): {', '.join(sorted(extra))}")

    empty = sorted(k for k in wanted if data[k] is None)
    if empty:
        raise ValueError(f"{cls.__name__} has empty field(s): {', '.join(empty)}")

    return cls(**{k: str(data[k]) for k in wanted})


def load_catalog(path: str) -> List[Media]:
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Catalog file {path} must contain a list of media entries")
    return [media_from_dict(entry) for entry in data]
