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
from collections.abc import Mapping
from types import MappingProxyType, TracebackType
from typing import Callable, Optional

from fsopts.errors import FileSystemManagerException, UnknownSchemeError
from fsopts.provider.abstractConfigBuilder import FileSystemConfigBuilder
from fsopts.provider.registry import get_provider_builder_class, get_provider_schemes

logger = logging.getLogger(__name__)

BuilderFactory = Callable[[], type[FileSystemConfigBuilder]]


class FileSystemManager:
    """
    Knows which config builder is responsible for each scheme.

    The scheme table is built once, by :meth:`init`, from the providers
    registered in :mod:`fsopts.provider.registry` (built-in ones and any
    installed plugins) plus the ``extra_providers`` given here. After that it
    never changes, so any number of threads can look schemes up without
    locking.

    Use it as a context manager, or call :meth:`init` and :meth:`close`::

        with FileSystemManager() as fsm:
            builder = fsm.resolve('http')
    """

    def __init__(self, extra_providers: Optional[Mapping[str, BuilderFactory]] = None) -> None:
        """
        :param extra_providers: scheme -> factory returning a config builder
               class, for providers only this manager should know about. These
               win over globally registered providers for the same scheme.
        """
        self._extra_providers = dict(extra_providers or {})
        self._builders: Optional[Mapping[str, FileSystemConfigBuilder]] = None

    def init(self) -> None:
        """Build the scheme table. Calling it again rebuilds it from the current registrations."""
        builders: dict[str, FileSystemConfigBuilder] = {}
        factories: dict[str, BuilderFactory] = {}
        for scheme in get_provider_schemes():
            factories[scheme] = lambda scheme=scheme: get_provider_builder_class(scheme)
        factories.update(self._extra_providers)
        for scheme, factory in factories.items():
            try:
                builder_class = factory()
            except ImportError:
                logger.debug("Unable to import the config builder for scheme '%s', as is expected "
                             "if the corresponding extra was omitted at installation time.", scheme)
                continue
            builders[scheme] = builder_class.get_instance()
        self._builders = MappingProxyType(builders)
        logger.debug("Initialized file system manager with schemes: %s", ', '.join(sorted(builders)))

    def close(self) -> None:
        self._builders = None

    def __enter__(self) -> "FileSystemManager":
        self.init()
        return self

    def __exit__(self,
                 exc_type: Optional[type[BaseException]],
                 exc_val: Optional[BaseException],
                 exc_tb: Optional[TracebackType]) -> None:
        self.close()

    def _table(self) -> Mapping[str, FileSystemConfigBuilder]:
        if self._builders is None:
            raise FileSystemManagerException()
        return self._builders

    @property
    def schemes(self) -> list[str]:
        """The registered schemes, sorted."""
        return sorted(self._table())

    def has_provider(self, scheme: str) -> bool:
        return scheme in self._table()

    def resolve(self, scheme: str, option_name: Optional[str] = None) -> FileSystemConfigBuilder:
        """
        Get the config builder responsible for the given scheme.

        :param option_name: the option being set, if any, for the error message
        :raises UnknownSchemeError: if no provider is registered for the scheme.
        """
        try:
            return self._table()[scheme]
        except KeyError:
            raise UnknownSchemeError(scheme, option_name)
