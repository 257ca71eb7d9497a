"""Runtime objects, their properties and the heap that owns them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .classes import ClassRegistry
from .values import UNDEFINED, parse_object_ref, value_length

logger = logging.getLogger(__name__)

MAX_OBJECT_NAME_LENGTH = 127
MAX_PROPERTY_NAME_LENGTH = 127
MAX_PROPERTY_VALUE_LENGTH = 1023
STATIC_SUFFIX = "_static"


class AccessModifier(enum.Enum):
    """Visibility of an object property."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


@dataclass
class ObjectProperty:
    """One named property of an object."""

    name: str
    value: str
    access: AccessModifier = AccessModifier.PUBLIC
    is_static: bool = False


def _strip_static(name: str) -> str:
    index = name.find(STATIC_SUFFIX)
    return name if index < 0 else name[:index]


class VMObject:
    """An object named "ClassName#id" (or "ClassName_static#id" for class state)."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name[:MAX_OBJECT_NAME_LENGTH]
        self._properties: dict[str, ObjectProperty] = {}

    def base_class_name(self) -> str:
        """The class name without the instance id and without a static suffix."""
        return _strip_static(self.class_name.split("#", 1)[0])

    def _access_owner(self) -> str:
        # Private instance properties are checked against the name before '#';
        # the static suffix is only dropped when the name carries no id.
        if "#" in self.class_name:
            return self.class_name.split("#", 1)[0]
        return _strip_static(self.class_name)

    def object_id(self) -> Optional[int]:
        """The numeric id after '#', or None when the name has none."""
        if "#" not in self.class_name:
            return None
        return parse_object_ref("obj:" + self.class_name.split("#", 1)[1])

    @property
    def properties(self) -> Iterator[ObjectProperty]:
        return iter(list(self._properties.values()))

    def set_property(
        self,
        name: Optional[str],
        value: Optional[str],
        access: AccessModifier = AccessModifier.PUBLIC,
        is_static: bool = False,
    ) -> None:
        """Create or overwrite a property, replacing its access and static flag."""
        if name is None or value is None:
            raise ValueError(
                "Invalid parameters for setting object property (name or value is None)"
            )
        key = name[:MAX_PROPERTY_NAME_LENGTH]
        self._properties[key] = ObjectProperty(
            key, value[:MAX_PROPERTY_VALUE_LENGTH], access, bool(is_static)
        )

    def find_property(self, name: str) -> Optional[ObjectProperty]:
        """Return the raw property record, ignoring access rules."""
        return self._properties.get(name[:MAX_PROPERTY_NAME_LENGTH])

    def get_property(
        self, name: Optional[str], accessing_class: Optional[str] = None
    ) -> Optional[str]:
        """Return a property's value, or None if missing or private to another class."""
        if name is None:
            return None
        prop = self.find_property(name)
        if prop is None:
            return None
        if prop.access is AccessModifier.PRIVATE:
            if accessing_class is not None and accessing_class == self._access_owner():
                return prop.value
            return None
        return prop.value

    def __repr__(self) -> str:
        return f"VMObject({self.class_name!r}, properties={len(self._properties)})"


class ObjectHeap:
    """All live objects, with id allocation and class-level static objects."""

    def __init__(self, classes: Optional[ClassRegistry] = None) -> None:
        self.classes = classes if classes is not None else ClassRegistry()
        self._objects: list[VMObject] = []
        self._next_id = 1

    def reset(self) -> None:
        """Drop every object and restart ids at 1."""
        self._objects.clear()
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[VMObject]:
        return iter(list(reversed(self._objects)))

    def create_object(self, class_name: str) -> VMObject:
        """Create "class_name#id" and fill in the class's default field values."""
        obj = VMObject(f"{class_name}#{self._next_id}")
        self._next_id += 1
        self._objects.append(obj)
        for field_name, value in self.classes.default_fields(class_name):
            obj.set_property(field_name, value, AccessModifier.PUBLIC, False)
        return obj

    def find_object_by_id(self, object_id: Optional[int]) -> Optional[VMObject]:
        """Return the object with this id, newest first, or None."""
        if object_id is None:
            return None
        for obj in reversed(self._objects):
            if obj.object_id() == object_id:
                return obj
        return None

    def find_static_class_object(self, class_name: str) -> VMObject:
        """Return the class's static object, creating it on first use."""
        prefix = f"{class_name}{STATIC_SUFFIX}"
        for obj in reversed(self._objects):
            name = obj.class_name
            if name.startswith(prefix) and name[len(prefix):len(prefix) + 1] in ("#", ""):
                return obj
        return self.create_object(prefix)

    def get_property_with_access(
        self,
        obj: Optional[VMObject],
        name: str,
        accessing_class: Optional[str] = None,
    ) -> str:
        """Read a property from the object, falling back to its class's statics.

        Returns "undefined" when nothing visible is found.
        """
        if obj is None:
            return UNDEFINED
        value = obj.get_property(name, accessing_class)
        if value is not None:
            return value
        if "#" not in obj.class_name:
            return UNDEFINED
        base = obj.base_class_name()
        static_obj = self.find_static_class_object(base)
        prop = static_obj.find_property(name)
        if prop is None or not prop.is_static:
            return UNDEFINED
        if prop.access is AccessModifier.PUBLIC:
            return prop.value
        if prop.access is AccessModifier.PRIVATE and accessing_class == base:
            return prop.value
        return UNDEFINED

    def get_static_property(
        self, class_name: Optional[str], prop_name: Optional[str]
    ) -> Optional[str]:
        """Read a property of the class's static object, checked from that class."""
        if class_name is None or prop_name is None:
            return None
        static_obj = self.find_static_class_object(class_name)
        return static_obj.get_property(prop_name, class_name)

    def initialize_test_class(self, obj: Optional[VMObject]) -> None:
        """Give TestClass objects their fixed sample properties."""
        if obj is None or "TestClass" not in obj.class_name:
            return
        if STATIC_SUFFIX in obj.class_name:
            obj.set_property(
                "static_prop", "Static Property Value", AccessModifier.PUBLIC, True
            )
            return
        obj.set_property("public_prop", "Public Property Value", AccessModifier.PUBLIC)
        obj.set_property("private_prop", "Private Property Value", AccessModifier.PRIVATE)
        companion = self.find_static_class_object("TestClass")
        if companion.get_property("static_prop", "TestClass") is None:
            companion.set_property(
                "static_prop", "Static Property Value", AccessModifier.PUBLIC, True
            )

    def resolve_member(
        self,
        target: Optional[str],
        name: str,
        accessing_class: Optional[str] = None,
    ) -> str:
        """Evaluate ``target.name`` where target is an evaluated value.

        ``length`` works on any value; "obj:<id>" reads an instance and a
        registered class name reads its static object.
        """
        if target is not None and name == "length":
            return str(value_length(target))
        if target is None or target == UNDEFINED:
            return UNDEFINED
        object_id = parse_object_ref(target)
        if object_id is not None:
            obj = self.find_object_by_id(object_id)
            if obj is None:
                logger.error(
                    "Object %s not found for property access '%s'.", target, name
                )
                return UNDEFINED
            return self.get_property_with_access(obj, name, accessing_class)
        if target not in self.classes:
            logger.error(
                "Target '%s' for member access '%s' is not a known class or object instance.",
                target,
                name,
            )
            return UNDEFINED
        static_obj = self.find_static_class_object(target)
        return self.get_property_with_access(static_obj, name, accessing_class)