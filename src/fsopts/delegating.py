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
import logging
from collections.abc import Sequence
from typing import Any

from fsopts.coercion import IncompatibleValue, Shape, UnparseableValue
from fsopts.errors import (InvalidConfigValueError,
                           NoSuchOptionError,
                           TargetInvocationError,
                           ValueCoercionError)
from fsopts.manager import FileSystemManager
from fsopts.options import FileSystemOptions

logger = logging.getLogger(__name__)


class DelegatingFileSystemOptionsBuilder:
    """
    Sets file system options by scheme and option name, for callers that only
    have those as text.

    Each call finds the config builder for the scheme, looks the option up in
    the builder's option table, converts the value to what the option's setter
    takes and calls the setter on the given bag. One call sets exactly one
    option; if anything goes wrong a :class:`fsopts.errors.ConfigError` is
    raised and that option is left as it was.

    >>> from fsopts.manager import FileSystemManager
    >>> with FileSystemManager() as fsm:
    ...     opts = FileSystemOptions()
    ...     DelegatingFileSystemOptionsBuilder(fsm).set_config_string(opts, 'http', 'proxyPort', '8080')
    ...     fsm.resolve('http').get_proxy_port(opts)
    8080
    """

    def __init__(self, manager: FileSystemManager) -> None:
        self.manager = manager

    def set_config_string(self, opts: FileSystemOptions, scheme: str, name: str, value: str) -> None:
        """
        Set an option from one text value, converting it to a number, boolean,
        path or whatever else the option takes.
        """
        self._set_value(opts, scheme, name, Shape.STRING, value)

    def set_config_strings(self, opts: FileSystemOptions, scheme: str, name: str,
                           values: Sequence[str]) -> None:
        """Set an array option from text values, converting each one in order."""
        self._set_value(opts, scheme, name, Shape.STRINGS, values)

    def set_config_class(self, opts: FileSystemOptions, scheme: str, name: str, cls: type) -> None:
        """
        Set an option from a class, which must provide the capability the
        option requires. The option gets a new instance of the class.
        """
        self._set_value(opts, scheme, name, Shape.CLASS, cls)

    def set_config_classes(self, opts: FileSystemOptions, scheme: str, name: str,
                           classes: Sequence[type]) -> None:
        """Set an array option from classes, instantiating each one in order."""
        self._set_value(opts, scheme, name, Shape.CLASSES, classes)

    def set_config_object(self, opts: FileSystemOptions, scheme: str, name: str, value: Any) -> None:
        """Set an option to an existing object, which must be of the type the option takes."""
        self._set_value(opts, scheme, name, Shape.OBJECT, value)

    def _set_value(self, opts: FileSystemOptions, scheme: str, name: str, shape: Shape, value: Any) -> None:
        builder = self.manager.resolve(scheme, name)
        option = builder.get_config_option(name)
        if option is None:
            raise NoSuchOptionError(scheme, name, type(builder).__name__)

        try:
            converted = option.coerce(shape, value)
        except UnparseableValue as e:
            raise ValueCoercionError(scheme, name, value, str(e)) from (e.__cause__ or e)
        except IncompatibleValue as e:
            raise InvalidConfigValueError(scheme, name, value, str(e)) from (e.__cause__ or e)

        logger.debug("Setting %s option '%s' with %s()", scheme, option.name, option.setter)
        try:
            option.invoke(builder, opts, converted)
        except Exception as e:
            raise TargetInvocationError(scheme, name, converted) from e
