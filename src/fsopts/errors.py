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
from typing import Any, Optional


class ConfigError(Exception):
    """
    Indicates that a configuration option could not be set.

    Every subclass has a stable, machine-readable :attr:`code`. Where the
    failure came from somewhere else (a parser, a builder's setter) that fault
    is chained as ``__cause__``.
    """
    code = "config-error"

    def __init__(self, message: str, scheme: Optional[str] = None,
                 option_name: Optional[str] = None, value: Any = None) -> None:
        """
        :param str message: human-readable description, should mention the scheme and option
        :param str scheme: the scheme the option was being set for, if known
        :param str option_name: the name of the option, if known
        :param value: the value that was supplied, if any
        """
        super().__init__(message)
        self.scheme = scheme
        self.option_name = option_name
        self.value = value


class UnknownSchemeError(ConfigError):
    """Indicates that no provider is registered for the scheme."""
    code = "unknown-scheme"

    def __init__(self, scheme: str, option_name: Optional[str] = None) -> None:
        message = f"No file system provider is registered for scheme '{scheme}'"
        if option_name is not None:
            message += f", so configuration option '{option_name}' cannot be set"
        super().__init__(message + ".", scheme=scheme, option_name=option_name)


class NoSuchOptionError(ConfigError):
    """Indicates that the scheme's config builder has no option of that name."""
    code = "no-such-option"

    def __init__(self, scheme: str, option_name: str, builder_name: str) -> None:
        super().__init__(f"The {builder_name} for scheme '{scheme}' has no "
                         f"configuration option named '{option_name}'.",
                         scheme=scheme, option_name=option_name)


class InvalidConfigValueError(ConfigError):
    """
    Indicates that a value's type or shape cannot satisfy what the option
    declares, e.g. an object of the wrong class or a class lacking a required
    capability.
    """
    code = "config-value-invalid"

    def __init__(self, scheme: str, option_name: str, value: Any, reason: str) -> None:
        super().__init__(f"Could not set configuration option '{option_name}' for scheme "
                         f"'{scheme}' to {value!r}: {reason}",
                         scheme=scheme, option_name=option_name, value=value)


class ValueCoercionError(ConfigError):
    """Indicates that text could not be parsed into the option's declared type."""
    code = "config-value-unparseable"

    def __init__(self, scheme: str, option_name: str, value: Any, reason: str) -> None:
        super().__init__(f"Could not convert {value!r} for configuration option "
                         f"'{option_name}' of scheme '{scheme}': {reason}",
                         scheme=scheme, option_name=option_name, value=value)


class TargetInvocationError(ConfigError):
    """Indicates that the config builder's setter rejected an already converted value."""
    code = "config-setter-failed"

    def __init__(self, scheme: str, option_name: str, value: Any) -> None:
        super().__init__(f"The config builder for scheme '{scheme}' rejected {value!r} "
                         f"for configuration option '{option_name}'.",
                         scheme=scheme, option_name=option_name, value=value)


class OptionsFileError(ConfigError):
    """Indicates that an options file or mapping is not laid out as scheme -> option -> value."""
    code = "options-file-invalid"

    def __init__(self, source: str, reason: str, scheme: Optional[str] = None,
                 option_name: Optional[str] = None) -> None:
        where = source
        if scheme is not None:
            where += f", scheme '{scheme}'"
        if option_name is not None:
            where += f", option '{option_name}'"
        super().__init__(f"Invalid options in {where}: {reason}",
                         scheme=scheme, option_name=option_name)
        self.source = source


class FileSystemManagerException(Exception):
    """Indicates that a file system manager was used outside of its initialized lifetime."""
    def __init__(self) -> None:
        super().__init__(
            'This method cannot be called before init() or after close() of the file system manager.')
