"""
Member descriptors for compound objects.

A TypeDescriptor lists the accessible members of a class: data members in
declaration order, then properties. It is built once per class and cached.
Attributes that only exist on an instance (set in ``__init__`` without an
annotation) are picked up per instance by ``TypeDescriptor.members_of``.
"""

import dataclasses
import functools
import inspect
import logging
import sys
import typing
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

_descriptor_cache: Dict[type, "TypeDescriptor"] = {}


@dataclass(frozen=True)
class MemberInfo:
    """
    A named, readable member of a class.

    Members are identified by ``(owner, name)`` where ``owner`` is the
    concrete class being described, not the base class that declares it.
    """

    owner: type
    name: str
    declared_type: Any = None
    is_property: bool = False
    is_dynamic: bool = False

    @property
    def key(self) -> Tuple[type, str]:
        return (self.owner, self.name)

    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def member_type(self, value: Any) -> Any:
        """Declared type of the member, or the runtime type of ``value`` when undeclared."""
        if self.declared_type is None:
            return type(value)
        return self.declared_type


@dataclass(frozen=True)
class TypeDescriptor:
    """Ordered accessible members of a class."""

    type: type
    data_members: Tuple[MemberInfo, ...]
    properties: Tuple[MemberInfo, ...]

    @property
    def members(self) -> Tuple[MemberInfo, ...]:
        return self.data_members + self.properties

    @property
    def member_names(self) -> List[str]:
        return [m.name for m in self.members]

    def find(self, name: str) -> Optional[MemberInfo]:
        for member in self.members:
            if member.name == name:
                return member
        return None

    def members_of(self, instance: Any) -> List[MemberInfo]:
        """
        Members of a specific instance.

        Declared data members come first, then public instance attributes the
        class does not declare (in insertion order), then properties.
        """
        declared = {m.name for m in self.members}
        dynamic = [
            MemberInfo(owner=self.type, name=name, is_dynamic=True)
            for name in _instance_attribute_names(instance)
            if name not in declared
        ]
        return list(self.data_members) + dynamic + list(self.properties)


def describe_type(tp: type) -> TypeDescriptor:
    """
    Get the cached descriptor for a class, building it on first use.

    Args:
        tp: The class to describe

    Returns:
        Descriptor listing the class's accessible members
    """
    descriptor = _descriptor_cache.get(tp)
    if descriptor is None:
        descriptor = _build_descriptor(tp)
        _descriptor_cache[tp] = descriptor
        logger.debug(
            f"Built descriptor for {tp.__qualname__}: {', '.join(descriptor.member_names) or '<no members>'}"
        )
    return descriptor


def clear_descriptor_cache() -> None:
    """Drop all cached descriptors (mainly for testing)."""
    _descriptor_cache.clear()


def _build_descriptor(tp: type) -> TypeDescriptor:
    hints = _resolved_hints(tp)

    data_members: List[MemberInfo] = []
    seen = set()
    for name in _data_member_names(tp):
        if name in seen or name.startswith("_"):
            continue
        seen.add(name)
        data_members.append(MemberInfo(owner=tp, name=name, declared_type=hints.get(name)))

    properties: List[MemberInfo] = []
    for klass in reversed(tp.__mro__):
        for name, attr in vars(klass).items():
            if name in seen or name.startswith("_"):
                continue
            if isinstance(attr, property):
                declared = _return_annotation(attr.fget)
            elif isinstance(attr, functools.cached_property):
                declared = _return_annotation(attr.func)
            else:
                continue
            seen.add(name)
            properties.append(
                MemberInfo(owner=tp, name=name, declared_type=declared, is_property=True)
            )

    return TypeDescriptor(type=tp, data_members=tuple(data_members), properties=tuple(properties))


def _data_member_names(tp: type) -> Iterator[str]:
    if dataclasses.is_dataclass(tp):
        for field in dataclasses.fields(tp):
            yield field.name

    fields = getattr(tp, "_fields", None)
    if issubclass(tp, tuple) and isinstance(fields, tuple):
        yield from fields

    for klass in reversed(tp.__mro__):
        if klass is object:
            continue
        for name, annotation in _own_annotations(klass).items():
            if not _is_class_var(annotation) and not _is_init_var(annotation):
                yield name
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield name


def _instance_attribute_names(instance: Any) -> Iterator[str]:
    try:
        attributes = vars(instance)
    except TypeError:
        return
    for name in attributes:
        if not name.startswith("_"):
            yield name


def _own_annotations(klass: type) -> Dict[str, Any]:
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        # Lazily evaluated annotations with undefined names (3.14+)
        import annotationlib

        return dict(inspect.get_annotations(klass, format=annotationlib.Format.STRING))


def _resolved_hints(tp: type) -> Dict[str, Any]:
    """
    Declared types per member name, resolved class by class.

    Each annotation is evaluated in the namespace of the module that declares
    it. Annotations that cannot be resolved map to None, so the member falls
    back to the runtime type of its value.
    """
    hints: Dict[str, Any] = {}
    for klass in reversed(tp.__mro__):
        module = sys.modules.get(klass.__module__)
        globalns = vars(module) if module is not None else {}
        localns = dict(vars(klass))
        for name, annotation in _own_annotations(klass).items():
            hints[name] = _resolve_annotation(annotation, globalns, localns)
    return hints


def _resolve_annotation(annotation: Any, globalns: Dict[str, Any], localns: Dict[str, Any]) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        resolved = eval(annotation, globalns, localns)
    except (NameError, AttributeError, SyntaxError, TypeError):
        return None
    if isinstance(resolved, str):
        return None
    return resolved


def _return_annotation(func: Any) -> Any:
    if func is None:
        return None
    try:
        return typing.get_type_hints(func).get("return")
    except (NameError, TypeError):
        return None


def _is_class_var(annotation: Any) -> bool:
    if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar"))


def _is_init_var(annotation: Any) -> bool:
    if annotation is dataclasses.InitVar or isinstance(annotation, dataclasses.InitVar):
        return True
    return isinstance(annotation, str) and annotation.startswith(
        ("InitVar", "dataclasses.InitVar")
    )
