"""
Serialization helpers that follow the definition order.

Instances of recorded classes are exported field by field in the order the
fields were written in the class body, via an intermediate dict:

    class Job(Ordered):
        employer = ""
        title = ""

    instance_to_yaml(job)   # employer: ... / title: ...

Fields are the recorded, non-dunder members bound to plain data in the
class body. Methods, properties and other descriptors are not fields.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Type, TypeVar

import yaml

from deforder.inspector import classify_member
from deforder.model import MemberKind
from deforder.recorder import declared_members, definition_order

T = TypeVar("T")


def fields_of(cls: type) -> List[str]:
    """
    Data fields of a recorded class, in definition order.

    Raises:
        TypeError: cls has no definition order
    """
    names = declared_members(cls)
    if names is None:
        raise TypeError(f"{cls.__qualname__} has no definition order to serialize by")
    namespace = vars(cls)
    return [
        name for name in names
        if not name.startswith("__")
        and name in namespace
        and classify_member(name, namespace[name]) is MemberKind.DATA
    ]


def instance_to_dict(obj: Any) -> Dict[str, Any]:
    return {name: getattr(obj, name) for name in fields_of(type(obj))}


def instance_from_dict(cls: Type[T], d: Dict[str, Any]) -> T:
    """
    Build an instance without calling __init__.

    Missing fields keep the class default; unknown keys are rejected.
    """
    fields = fields_of(cls)
    unknown = [key for key in d if key not in fields]
    if unknown:
        raise TypeError(f"Unknown field(s) for {cls.__qualname__}: {', '.join(unknown)}")
    obj = cls.__new__(cls)
    for name in fields:
        if name in d:
            setattr(obj, name, d[name])
    return obj


def instance_to_json(obj: Any) -> str:
    # No sort_keys: key order is the definition order
    return json.dumps(instance_to_dict(obj))


def instance_from_json(cls: Type[T], s: str) -> T:
    return instance_from_dict(cls, json.loads(s))


def instance_to_yaml(obj: Any) -> str:
    return yaml.safe_dump(instance_to_dict(obj), sort_keys=False)


def instance_from_yaml(cls: Type[T], s: str) -> T:
    d = yaml.safe_load(s)
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise TypeError(
            f"YAML for {cls.__qualname__} must be a mapping, not {type(d).__name__}"
        )
    return instance_from_dict(cls, d)


def record_to_dict(cls: type) -> Dict[str, Any]:
    order = definition_order(cls)
    return {
        "module": cls.__module__,
        "qualname": cls.__qualname__,
        "definition_order": list(order) if order is not None else None,
    }


def record_to_yaml(cls: type) -> str:
    return yaml.safe_dump(record_to_dict(cls), sort_keys=False)
