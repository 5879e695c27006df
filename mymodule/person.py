# Copyright (c) Facebook, Inc. and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import operator

from .record import member, record, require

DEFAULT_FIRST_NAME = "John"
DEFAULT_LAST_NAME = "Doe"
DEFAULT_NUMBER = 42


@record(kw_only=False)
class Person:
    """Person object"""

    first_name: str = member(DEFAULT_FIRST_NAME, doc="First name of the person")
    last_name: str = member(DEFAULT_LAST_NAME, doc="Last name of the person")
    # bound like a C int: anything with __index__, stored as int
    number: int = member(
        DEFAULT_NUMBER,
        doc="Number associated with the person",
        convert=operator.index,
    )

    def __str__(self):
        return "Person(first_name={!s}, last_name={!s}, number={})".format(
            require(self, "first_name"),
            require(self, "last_name"),
            require(self, "number"),
        )

    def name(self) -> str:
        """Return the name of a person combining first and last names"""
        first_name = require(self, "first_name")
        last_name = require(self, "last_name")
        return f"{first_name!s} {last_name!s}"
