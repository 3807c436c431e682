# Copyright (C) 2015-2025 Regents of the University of California
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Rules for turning caller-supplied values into the types config builders expect.

Each configuration option declares a :class:`ValueType`. A value arrives in
one of a few shapes (see :class:`Shape`), and the value type knows how to
turn each shape it supports into the exact value the option's setter takes.
Shapes a value type cannot handle raise :class:`IncompatibleValue`; text that
cannot be parsed raises :class:`UnparseableValue` chained to the parser's own
error.
"""
import enum
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

from fsopts.lib.conversions import human2bytes, strtobool

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


class Shape(enum.Enum):
    """The form in which a value was handed to the dispatcher."""
    STRING = "string"
    STRINGS = "strings"
    CLASS = "class"
    CLASSES = "classes"
    OBJECT = "object"


class IncompatibleValue(TypeError):
    """The value's type or shape cannot satisfy the declared value type."""


class UnparseableValue(ValueError):
    """Text could not be parsed into the declared value type."""


class ValueType:
    """
    Base class for declared option value types.

    Subclasses set :attr:`python_type` and override :meth:`from_text` when the
    type can be built from text. Objects are checked against
    :attr:`python_type` here; only :class:`Instance` accepts classes.
    """
    python_type: type = object

    def describe(self) -> str:
        return self.python_type.__name__

    def from_text(self, text: str) -> Any:
        raise IncompatibleValue(f"{self.describe()} cannot be built from text")

    def from_texts(self, texts: Sequence[str]) -> Any:
        if len(texts) != 1:
            raise IncompatibleValue(f"expected a single value for {self.describe()}, "
                                    f"got {len(texts)}")
        return self.from_text(texts[0])

    def from_object(self, value: Any) -> Any:
        if not isinstance(value, self.python_type):
            raise IncompatibleValue(f"{type(value).__name__} is not a {self.describe()}")
        return value

    def from_class(self, cls: type) -> Any:
        raise IncompatibleValue(f"{self.describe()} cannot be built from a class")

    def from_classes(self, classes: Sequence[type]) -> Any:
        if len(classes) != 1:
            raise IncompatibleValue(f"expected a single class for {self.describe()}, "
                                    f"got {len(classes)}")
        return self.from_class(classes[0])

    def coerce(self, shape: Shape, value: Any) -> Any:
        """
        Convert a value of the given shape to this type.

        :raises IncompatibleValue: if the shape or the value's type does not fit
        :raises UnparseableValue: if text does not parse as this type
        """
        if shape is Shape.STRING:
            _check_text(value)
            return self.from_text(value)
        elif shape is Shape.STRINGS:
            texts = _check_sequence(value, "text values")
            for text in texts:
                _check_text(text)
            return self.from_texts(texts)
        elif shape is Shape.CLASS:
            _check_class(value)
            return self.from_class(value)
        elif shape is Shape.CLASSES:
            classes = _check_sequence(value, "classes")
            for cls in classes:
                _check_class(cls)
            return self.from_classes(classes)
        elif shape is Shape.OBJECT:
            return self.from_object(value)
        raise ValueError(f"Unknown value shape {shape!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _check_text(value: Any) -> None:
    if not isinstance(value, str):
        raise IncompatibleValue(f"expected text, got {type(value).__name__}")


def _check_class(value: Any) -> None:
    if not isinstance(value, type):
        raise IncompatibleValue(f"expected a class, got {type(value).__name__}")


def _check_sequence(value: Any, what: str) -> list[Any]:
    # A bare string is a sequence of characters, which is never what was meant.
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise IncompatibleValue(f"expected a sequence of {what}, got {type(value).__name__}")
    return list(value)


def _parse(value_type: ValueType, text: str, parser: Any) -> Any:
    try:
        return parser(text)
    except (ValueError, ArithmeticError) as e:
        raise UnparseableValue(f"{text!r} is not a valid {value_type.describe()}") from e


def _parse_decimal_integer(text: str) -> int:
    # int() would also take "8_080", padding and non-ASCII digits.
    if not _DECIMAL_INTEGER.fullmatch(text):
        raise ValueError(f"invalid literal for a decimal integer: {text!r}")
    return int(text)


class Text(ValueType):
    python_type = str

    def describe(self) -> str:
        return "text"

    def from_text(self, text: str) -> str:
        return text


class Integer(ValueType):
    python_type = int

    def describe(self) -> str:
        return "integer"

    def from_text(self, text: str) -> int:
        return _parse(self, text, _parse_decimal_integer)

    def from_object(self, value: Any) -> int:
        if isinstance(value, bool):
            raise IncompatibleValue("bool is not an integer")
        return super().from_object(value)


class Float(ValueType):
    python_type = float

    def describe(self) -> str:
        return "number"

    def from_text(self, text: str) -> float:
        return _parse(self, text, float)

    def from_object(self, value: Any) -> float:
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return super().from_object(value)


class Boolean(ValueType):
    python_type = bool

    def describe(self) -> str:
        return "boolean"

    def from_text(self, text: str) -> bool:
        return _parse(self, text, strtobool)


class ByteSize(Integer):
    """A non-negative number of bytes, which may be written with units, like '64 MiB'."""

    def describe(self) -> str:
        return "byte size"

    def from_text(self, text: str) -> int:
        return _parse(self, text, human2bytes)


class PathValue(ValueType):
    python_type = Path

    def describe(self) -> str:
        return "path"

    def from_text(self, text: str) -> Path:
        if not text.strip():
            raise UnparseableValue("an empty string is not a path")
        return Path(text)


class EnumValue(ValueType):
    """A member of an enumeration, named in text by member name or value, case-insensitively."""

    def __init__(self, enum_type: type[enum.Enum]) -> None:
        self.python_type = enum_type

    def describe(self) -> str:
        return self.python_type.__name__

    def from_text(self, text: str) -> enum.Enum:
        wanted = text.strip().lower()
        for member in self.python_type:
            if member.name.lower() == wanted or str(member.value).lower() == wanted:
                return member
        choices = ', '.join(m.name for m in self.python_type)
        raise UnparseableValue(f"{text!r} is not one of {choices}")

    def __repr__(self) -> str:
        return f"EnumValue({self.python_type.__name__})"


class Instance(ValueType):
    """
    An instance of a class or capability.

    Can be given an object, which must already be an instance, or a class,
    which must be a subclass and is then instantiated with no arguments.
    """

    def __init__(self, cls: type, description: Optional[str] = None) -> None:
        self.python_type = cls
        self._description = description

    def describe(self) -> str:
        return self._description or self.python_type.__name__

    def from_class(self, cls: type) -> Any:
        if not issubclass(cls, self.python_type):
            raise IncompatibleValue(f"{cls.__name__} is not a subclass of {self.describe()}")
        try:
            return cls()
        except Exception as e:
            raise IncompatibleValue(f"{cls.__name__} could not be instantiated without arguments") from e

    def __repr__(self) -> str:
        return f"Instance({self.python_type.__name__})"


class ArrayOf(ValueType):
    """A homogeneous tuple, each element converted independently and in order."""
    python_type = tuple

    def __init__(self, element_type: ValueType) -> None:
        self.element_type = element_type

    def describe(self) -> str:
        return f"array of {self.element_type.describe()}"

    def from_text(self, text: str) -> tuple:
        return (self.element_type.from_text(text),)

    def from_texts(self, texts: Sequence[str]) -> tuple:
        return tuple(self.element_type.from_text(text) for text in texts)

    def from_object(self, value: Any) -> tuple:
        items = _check_sequence(value, self.element_type.describe())
        return tuple(self.element_type.from_object(item) for item in items)

    def from_class(self, cls: type) -> tuple:
        return (self.element_type.from_class(cls),)

    def from_classes(self, classes: Sequence[type]) -> tuple:
        return tuple(self.element_type.from_class(cls) for cls in classes)

    def __repr__(self) -> str:
        return f"ArrayOf({self.element_type!r})"
