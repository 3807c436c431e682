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
from typing import Any, Dict, Iterator, Optional, Tuple


class FileSystemOptions:
    """
    A bag of file system configuration values, shared by all schemes.

    Values are stored under a (scope, name) key, where the scope belongs to
    the config builder that wrote them, so two builders never see each
    other's settings. Callers are not expected to read or write the bag
    directly; they go through a config builder's getters and setters.

    Writing a single key is atomic, so concurrent writes of different options
    to one bag are safe. Callers that care about the order of writes must
    serialize them themselves.

    >>> opts = FileSystemOptions()
    >>> opts.set_option('http', 'proxyHost', 'proxy')
    >>> opts.get_option('http', 'proxyHost')
    'proxy'
    >>> opts.has_option('sftp', 'proxyHost')
    False
    >>> opts.as_dict()
    {'http': {'proxyHost': 'proxy'}}
    """

    def __init__(self) -> None:
        self._options: Dict[Tuple[str, str], Any] = {}

    def set_option(self, scope: str, name: str, value: Any) -> None:
        self._options[(scope, name)] = value

    def get_option(self, scope: str, name: str, default: Any = None) -> Any:
        return self._options.get((scope, name), default)

    def has_option(self, scope: str, name: str) -> bool:
        return (scope, name) in self._options

    def remove_option(self, scope: str, name: str) -> None:
        self._options.pop((scope, name), None)

    def scopes(self) -> Iterator[str]:
        seen = set()
        for scope, _ in list(self._options):
            if scope not in seen:
                seen.add(scope)
                yield scope

    def as_dict(self, scope: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
        """
        Return a nested plain-dict view of the bag, {scope: {name: value}}.

        :param scope: if given, only include that scope.
        """
        result: Dict[str, Dict[str, Any]] = {}
        for (option_scope, name), value in list(self._options.items()):
            if scope is None or option_scope == scope:
                result.setdefault(option_scope, {})[name] = value
        return result

    def copy(self) -> "FileSystemOptions":
        """Make a shallow copy; the stored values themselves are shared."""
        clone = type(self)()
        clone._options = dict(self._options)
        return clone

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSystemOptions):
            return NotImplemented
        return self._options == other._options

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_dict()!r})"
