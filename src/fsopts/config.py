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
Options files and command line assignments.

An options file is YAML laid out as scheme -> option -> value::

    http:
      proxyHost: proxy
      proxyPort: 8080
    sftp:
      identities: [/home/me/.ssh/id_ed25519, /home/me/.ssh/id_rsa]
      userInfo:
        class: fsopts.provider.sftpBuilder:TrustEveryoneUserInfo

Each value is routed to the matching ``set_config_*`` call of a
:class:`fsopts.delegating.DelegatingFileSystemOptionsBuilder`.
"""
import enum
import importlib
import logging
import os
from pathlib import PurePath
from typing import IO, Any, Dict, List, Mapping, Tuple, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fsopts.delegating import DelegatingFileSystemOptionsBuilder
from fsopts.errors import OptionsFileError
from fsopts.options import FileSystemOptions

logger = logging.getLogger(__name__)

_SCALARS = (str, bool, int, float)


def parse_str_list(s: str) -> List[str]:
    return [str(x) for x in s.split(",")]


def parse_assignment(assignment: str) -> Tuple[str, str, str]:
    """
    Split a command line assignment into scheme, option name and value.

    >>> parse_assignment('http.proxyHost=proxy')
    ('http', 'proxyHost', 'proxy')
    >>> parse_assignment('sftp.identities=/a,/b')
    ('sftp', 'identities', '/a,/b')
    >>> parse_assignment('http.userAgent=a=b')
    ('http', 'userAgent', 'a=b')
    >>> parse_assignment('proxyHost=proxy')
    Traceback (most recent call last):
    ...
    ValueError: Expected SCHEME.OPTION=VALUE, got 'proxyHost=proxy'
    """
    key, sep, value = assignment.partition('=')
    scheme, dot, name = key.strip().partition('.')
    if not sep or not dot or not scheme or not name:
        raise ValueError(f"Expected SCHEME.OPTION=VALUE, got {assignment!r}")
    return scheme, name, value


def import_class(reference: str) -> type:
    """
    Find a class from a 'package.module:ClassName' reference.

    A 'package.module.ClassName' reference works too.
    """
    if ':' in reference:
        module_name, _, attribute = reference.partition(':')
    else:
        module_name, _, attribute = reference.rpartition('.')
    if not module_name or not attribute:
        raise ValueError(f"Expected a class reference like 'package.module:ClassName', got {reference!r}")
    module = importlib.import_module(module_name)
    found = module
    for part in attribute.split('.'):
        found = getattr(found, part)
    if not isinstance(found, type):
        raise ValueError(f"{reference} is not a class")
    return found


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def load_options_file(path: Union[str, "os.PathLike[str]"]) -> Dict[str, Any]:
    """
    Read an options file.

    :raises OptionsFileError: if it cannot be read or does not hold a YAML mapping.
    """
    source = os.fspath(path)
    yaml = YAML(typ='safe', pure=True)
    try:
        with open(source, encoding="utf-8") as f:
            data = yaml.load(f)
    except YAMLError as e:
        raise OptionsFileError(source, f"not valid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise OptionsFileError(source, f"not readable as text: {e}") from e
    except OSError as e:
        raise OptionsFileError(source, f"cannot be read: {e.strerror or e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OptionsFileError(source, f"expected a mapping of schemes, got {type(data).__name__}")
    logger.debug("Loaded options file %s with schemes %s", source, list(data))
    return data


def apply_options(delegate: DelegatingFileSystemOptionsBuilder, opts: FileSystemOptions,
                  options: Mapping[str, Any], source: str = "options") -> None:
    """
    Set every option in a scheme -> option -> value mapping.

    Options are set in the order they appear. A failure stops at that option,
    and the ones already set stay set.

    :param source: where the mapping came from, for error messages
    :raises OptionsFileError: if the mapping is not laid out right
    :raises fsopts.errors.ConfigError: if an option cannot be set
    """
    for scheme, scheme_options in options.items():
        if not isinstance(scheme_options, Mapping):
            raise OptionsFileError(source, "expected a mapping of option names to values",
                                   scheme=str(scheme))
        for name, value in scheme_options.items():
            _apply_one(delegate, opts, str(scheme), str(name), value, source)


def _apply_one(delegate: DelegatingFileSystemOptionsBuilder, opts: FileSystemOptions,
               scheme: str, name: str, value: Any, source: str) -> None:
    if isinstance(value, _SCALARS):
        delegate.set_config_string(opts, scheme, name, _as_text(value))
    elif isinstance(value, list):
        if not all(isinstance(item, _SCALARS) for item in value):
            raise OptionsFileError(source, "lists may only hold plain values", scheme=scheme, option_name=name)
        delegate.set_config_strings(opts, scheme, name, [_as_text(item) for item in value])
    elif isinstance(value, Mapping) and set(value) == {"class"}:
        delegate.set_config_class(opts, scheme, name, _load_class(value["class"], source, scheme, name))
    elif isinstance(value, Mapping) and set(value) == {"classes"} and isinstance(value["classes"], list):
        classes = [_load_class(reference, source, scheme, name) for reference in value["classes"]]
        delegate.set_config_classes(opts, scheme, name, classes)
    else:
        raise OptionsFileError(source, f"cannot use a {type(value).__name__} as an option value; "
                                       f"expected text, a number, a boolean, a list, "
                                       f"or a mapping with a 'class' or 'classes' key",
                               scheme=scheme, option_name=name)


def _load_class(reference: Any, source: str, scheme: str, name: str) -> type:
    if not isinstance(reference, str):
        raise OptionsFileError(source, f"class references must be text, got {reference!r}",
                               scheme=scheme, option_name=name)
    try:
        return import_class(reference)
    except (ImportError, AttributeError, ValueError) as e:
        raise OptionsFileError(source, f"cannot load class {reference!r}: {e}",
                               scheme=scheme, option_name=name) from e


def _displayable(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (tuple, list)):
        return [_displayable(item) for item in value]
    if value is None or isinstance(value, _SCALARS):
        return value
    return repr(value)


def dump_options(opts: FileSystemOptions, stream: IO[str]) -> None:
    """Write the bag's contents as YAML, one mapping per builder scope."""
    data = {scope: {name: _displayable(value) for name, value in values.items()}
            for scope, values in opts.as_dict().items()}
    yaml = YAML(typ='safe', pure=True)
    yaml.default_flow_style = False
    yaml.dump(data, stream)
