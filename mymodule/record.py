# Copyright (c) Facebook, Inc. and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import dataclasses
import logging
from dataclasses import MISSING, dataclass, field, fields
from typing import Type

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("mymodule")


class MissingFieldError(AttributeError):
    """A record field was read after it had been deleted."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


def member(default, doc=None, convert=None):
    """A record field with a default, a doc string and an optional converter.

    The converter runs on every assignment, including the one made by the
    generated __init__. A converted field cannot be deleted.
    """
    metadata = {"doc": doc}
    if convert is not None:
        metadata["convert"] = convert
    return field(default=default, metadata=metadata)


def record(cls=None, *, kw_only: bool = True):
    """Turn a class into a slotted dataclass with a pydantic validation model."""

    def decorator(cls):
        if not isinstance(cls, type):
            raise TypeError("record() can only decorate a class")
        return model(
            dataclass(kw_only=kw_only, slots=True, repr=False, eq=False)(cls)
        )

    if cls is None:
        return decorator
    return decorator(cls)


def require(self, name: str):
    """Return the value of a field, or raise MissingFieldError if it was deleted."""
    try:
        return getattr(self, name)
    except AttributeError:
        logger.debug("%s has no value for %s", type(self).__name__, name)
        raise MissingFieldError(name) from None


def validator(self) -> BaseModel:
    attrs = {name: require(self, name) for name in self.__pydantic__.model_fields}
    return self.__pydantic__(**attrs)


def field_values(self):
    # deleted fields read as MISSING
    return tuple(getattr(self, f.name, MISSING) for f in fields(self))


def record_repr(self):
    parts = [
        f"{f.name}=<missing>" if value is MISSING else f"{f.name}={value!r}"
        for f, value in zip(fields(self), field_values(self))
    ]
    return f"{type(self).__name__}({', '.join(parts)})"


def record_eq(self, other):
    if other.__class__ is not self.__class__:
        return NotImplemented
    return field_values(self) == field_values(other)


def get_field_def(field):
    # carry the dataclass default/default_factory and doc over to pydantic
    kwargs = {"description": field.metadata.get("doc")}
    if not isinstance(field.default, dataclasses._MISSING_TYPE):
        kwargs["default"] = field.default
    if not isinstance(field.default_factory, dataclasses._MISSING_TYPE):
        kwargs["default_factory"] = field.default_factory
    return Field(**kwargs)


def converting_setattr(converters):
    def __setattr__(self, name, value):
        convert = converters.get(name)
        if convert is not None:
            value = convert(value)
        object.__setattr__(self, name, value)

    return __setattr__


def guarded_delattr(converters):
    def __delattr__(self, name):
        if name in converters:
            raise TypeError(f"can't delete {name} of {type(self).__name__}")
        object.__delattr__(self, name)

    return __delattr__


def model(cls: Type) -> Type:
    """
    Attach a Pydantic model, field converters, repr and equality to a dataclass.
    """
    pydantic_cls = type(
        cls.__name__ + "Model",
        (BaseModel,),
        {
            "__module__": cls.__module__,
            "__annotations__": {field.name: field.type for field in fields(cls)},
            "model_config": ConfigDict(extra="ignore"),
            **{field.name: get_field_def(field) for field in fields(cls)},
        },
    )
    logger.debug("built %s for %s", pydantic_cls.__name__, cls.__name__)
    cls.__pydantic__ = pydantic_cls
    cls.validator = validator
    if "__repr__" not in cls.__dict__:
        cls.__repr__ = record_repr
    if "__eq__" not in cls.__dict__:
        cls.__eq__ = record_eq
        cls.__hash__ = None

    converters = {
        field.name: field.metadata["convert"]
        for field in fields(cls)
        if "convert" in field.metadata
    }
    if converters:
        cls.__setattr__ = converting_setattr(converters)
        cls.__delattr__ = guarded_delattr(converters)
    return cls
