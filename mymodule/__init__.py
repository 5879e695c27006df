# Copyright (c) Facebook, Inc. and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
"""Example module that creates a Person type"""
from .person import Person
from .record import MissingFieldError, member, record

__all__ = ["MissingFieldError", "Person", "member", "record"]
