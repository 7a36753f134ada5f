"""Results of looking a document up by its identifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import mongoengine as me


@dataclass(frozen=True)
class Found:
    document: me.Document


@dataclass(frozen=True)
class NotFound:
    """The id is a valid ObjectId but no document has it."""

    raw_id: str


@dataclass(frozen=True)
class MalformedId:
    """The id cannot be parsed as an ObjectId."""

    raw_id: str


LookupResult = Union[Found, NotFound, MalformedId]
