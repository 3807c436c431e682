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
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, TypeVar

from fsopts.coercion import Shape, ValueType
from fsopts.lib.memoize import sync_memoize
from fsopts.options import FileSystemOptions

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def setter_name(option_name: str) -> str:
    """
    Derive the name of the builder method that sets the given option.

    >>> setter_name('proxyHost')
    'set_proxy_host'
    >>> setter_name('userinfo')
    'set_userinfo'
    >>> setter_name('rootURIPath')
    'set_root_uri_path'
    """
    return 'set_' + _CAMEL_BOUNDARY.sub('_', option_name).lower()


class ConfigOption:
    """
    One entry in a config builder's option table.

    Knows the value type its setter takes, so it can convert a raw value of
    any supported shape and then hand it to the setter.
    """

    def __init__(self, name: str, value_type: ValueType, setter: Optional[str] = None,
                 help: Optional[str] = None) -> None:
        """
        :param name: the option name callers use, in camel case
        :param value_type: what the setter's value parameter accepts
        :param setter: name of the builder method; derived from the option name if not given
        :param help: a one-line description for listings
        """
        self.name = name
        self.value_type = value_type
        self.setter = setter or setter_name(name)
        self.help = help

    def coerce(self, shape: Shape, value: Any) -> Any:
        return self.value_type.coerce(shape, value)

    def invoke(self, builder: "FileSystemConfigBuilder", opts: FileSystemOptions, value: Any) -> None:
        getattr(builder, self.setter)(opts, value)

    def __repr__(self) -> str:
        return f"ConfigOption({self.name!r}, {self.value_type!r}, setter={self.setter!r})"


def option_table(*options: ConfigOption,
                 inherit: Optional[Mapping[str, ConfigOption]] = None) -> Mapping[str, ConfigOption]:
    """
    Build a read-only option table, keyed by option name.

    :param inherit: a parent builder's table; its entries are kept unless redeclared.
    """
    table: dict[str, ConfigOption] = dict(inherit or {})
    declared: set[str] = set()
    for option in options:
        key = option.name.lower()
        if key in declared:
            raise ValueError(f"Option '{option.name}' is declared more than once")
        declared.add(key)
        for existing in [name for name in table if name.lower() == key]:
            del table[existing]
        table[option.name] = option
    return MappingProxyType(table)


def find_option(table: Mapping[str, ConfigOption], option_name: str) -> Optional[ConfigOption]:
    """Look up an option by name, ignoring case."""
    try:
        return table[option_name]
    except KeyError:
        wanted = option_name.lower()
        for name, option in table.items():
            if name.lower() == wanted:
                return option
        return None


BuilderType = TypeVar('BuilderType', bound='FileSystemConfigBuilder')


class FileSystemConfigBuilder:
    """
    Base class for the per-provider configuration builders.

    A builder stores and reads its provider's options in a
    :class:`FileSystemOptions` bag, under its own :attr:`config_scope`. It
    keeps no state of its own, so one instance per class is shared by every
    caller; get it with :meth:`get_instance`.

    Subclasses declare every option that can be set by name in
    :attr:`config_options`, and provide the ``set_<option>(opts, value)``
    method each entry names, along with a matching getter.
    """
    config_scope = "default"
    config_options: Mapping[str, ConfigOption] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for option in cls.config_options.values():
            if not callable(getattr(cls, option.setter, None)):
                raise TypeError(f"{cls.__name__} declares option '{option.name}' "
                                f"but has no method {option.setter}()")

    @classmethod
    def get_instance(cls: type[BuilderType]) -> BuilderType:
        """Get the shared instance of this builder class."""
        return _get_instance(cls)

    def get_config_option(self, option_name: str) -> Optional[ConfigOption]:
        return find_option(self.config_options, option_name)

    def _set_param(self, opts: FileSystemOptions, name: str, value: Any) -> None:
        logger.debug("Setting %s.%s to %r", self.config_scope, name, value)
        opts.set_option(self.config_scope, name, value)

    def _get_param(self, opts: Optional[FileSystemOptions], name: str, default: Any = None) -> Any:
        if opts is None:
            return default
        return opts.get_option(self.config_scope, name, default)

    def _has_param(self, opts: Optional[FileSystemOptions], name: str) -> bool:
        return opts is not None and opts.has_option(self.config_scope, name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} scope={self.config_scope!r}>"


@sync_memoize
def _get_instance(cls: type) -> Any:
    logger.debug("Creating shared instance of %s", cls.__name__)
    return cls()
