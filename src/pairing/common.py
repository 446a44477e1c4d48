from __future__ import annotations

from dataclasses import fields
from typing import Iterator, Protocol, TypeVar

Tclass = TypeVar("Tclass", bound=type)
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Bidirectional(Protocol[T_co]):
    """A finite collection which can be traversed in both directions.

    Its first element is the first item of :func:`iter`, its last element
    the first item of :func:`reversed`. All sequences qualify, as do
    dicts and their views.
    """

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[T_co]:
        ...

    def __reversed__(self) -> Iterator[T_co]:
        ...


# adapted from github.com/ericvsmith/dataclasses
# under its Apache 2.0 license.
def add_slots(cls: Tclass) -> Tclass:  # pragma: no cover
    if "__slots__" in cls.__dict__:
        raise TypeError(f"{cls.__name__} already specifies __slots__")
    cls_dict = dict(cls.__dict__)
    field_names = tuple(f.name for f in fields(cls))
    cls_dict["__slots__"] = field_names
    for field_name in field_names:
        cls_dict.pop(field_name, None)
    cls_dict.pop("__dict__", None)
    qualname = getattr(cls, "__qualname__", None)
    cls = type(cls)(cls.__name__, cls.__bases__, cls_dict)
    if qualname is not None:
        cls.__qualname__ = qualname
    return cls
