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
import enum
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Tuple

from fsopts.coercion import (ArrayOf,
                             Boolean,
                             EnumValue,
                             Instance,
                             Integer,
                             PathValue,
                             Text)
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)
from fsopts.provider.httpBuilder import check_non_negative, check_port

logger = logging.getLogger(__name__)

HOST_KEY_CHECKING_CHOICES = ("yes", "no", "ask")


class UserInfo(ABC):
    """
    What an SSH session asks when it needs a decision or a secret from the user.
    """

    @abstractmethod
    def get_passphrase(self) -> Optional[str]:
        raise NotImplementedError()

    @abstractmethod
    def get_password(self) -> Optional[str]:
        raise NotImplementedError()

    @abstractmethod
    def prompt_password(self, message: str) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def prompt_passphrase(self, message: str) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def prompt_yes_no(self, message: str) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def show_message(self, message: str) -> None:
        raise NotImplementedError()


class TrustEveryoneUserInfo(UserInfo):
    """Answers yes to every question, including whether to trust an unknown host key."""

    def get_passphrase(self) -> Optional[str]:
        return None

    def get_password(self) -> Optional[str]:
        return None

    def prompt_password(self, message: str) -> bool:
        return False

    def prompt_passphrase(self, message: str) -> bool:
        return False

    def prompt_yes_no(self, message: str) -> bool:
        return True

    def show_message(self, message: str) -> None:
        logger.info(message)


class ProxyType(enum.Enum):
    HTTP = "http"
    SOCKS5 = "socks5"
    STREAM = "stream"


class SftpFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options for the sftp provider."""
    config_scope = "sftp"
    config_options = option_table(
        ConfigOption("userInfo", Instance(UserInfo, "UserInfo capability"),
                     help="Handler for questions and secrets the SSH session asks for."),
        ConfigOption("identities", ArrayOf(PathValue()), help="Private key files to try, in order."),
        ConfigOption("knownHosts", PathValue(), help="known_hosts file to check host keys against."),
        ConfigOption("strictHostKeyChecking", Text(), help="One of yes, no or ask."),
        ConfigOption("compression", Text(), help="Compression algorithms, like zlib,none."),
        ConfigOption("timeout", Integer(), help="Session timeout in milliseconds, 0 for none."),
        ConfigOption("userDirIsRoot", Boolean(), help="Whether paths are relative to the user's home."),
        ConfigOption("preferredAuthentications", Text(),
                     help="Authentication methods to try, like publickey,password."),
        ConfigOption("proxyHost", Text(), help="Host name of the proxy to connect through."),
        ConfigOption("proxyPort", Integer(), help="Port of the proxy."),
        ConfigOption("proxyType", EnumValue(ProxyType), help="Kind of proxy: http, socks5 or stream."),
    )

    def set_user_info(self, opts: FileSystemOptions, info: UserInfo) -> None:
        self._set_param(opts, "userInfo", info)

    def get_user_info(self, opts: Optional[FileSystemOptions]) -> Optional[UserInfo]:
        return self._get_param(opts, "userInfo")

    def set_identities(self, opts: FileSystemOptions, identities: Tuple[Path, ...]) -> None:
        self._set_param(opts, "identities", tuple(identities))

    def get_identities(self, opts: Optional[FileSystemOptions]) -> Optional[Tuple[Path, ...]]:
        return self._get_param(opts, "identities")

    def set_known_hosts(self, opts: FileSystemOptions, known_hosts: Path) -> None:
        self._set_param(opts, "knownHosts", known_hosts)

    def get_known_hosts(self, opts: Optional[FileSystemOptions]) -> Optional[Path]:
        return self._get_param(opts, "knownHosts")

    def set_strict_host_key_checking(self, opts: FileSystemOptions, checking: str) -> None:
        if checking not in HOST_KEY_CHECKING_CHOICES:
            raise ValueError(f"strictHostKeyChecking must be one of "
                             f"{', '.join(HOST_KEY_CHECKING_CHOICES)}, got {checking!r}")
        self._set_param(opts, "strictHostKeyChecking", checking)

    def get_strict_host_key_checking(self, opts: Optional[FileSystemOptions]) -> str:
        return self._get_param(opts, "strictHostKeyChecking", "no")

    def set_compression(self, opts: FileSystemOptions, compression: str) -> None:
        self._set_param(opts, "compression", compression)

    def get_compression(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "compression")

    def set_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("timeout", millis)
        self._set_param(opts, "timeout", millis)

    def get_timeout(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "timeout", 0)

    def set_user_dir_is_root(self, opts: FileSystemOptions, user_dir_is_root: bool) -> None:
        self._set_param(opts, "userDirIsRoot", user_dir_is_root)

    def get_user_dir_is_root(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "userDirIsRoot", True)

    def set_preferred_authentications(self, opts: FileSystemOptions, methods: str) -> None:
        self._set_param(opts, "preferredAuthentications", methods)

    def get_preferred_authentications(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "preferredAuthentications")

    def set_proxy_host(self, opts: FileSystemOptions, host: str) -> None:
        self._set_param(opts, "proxyHost", host)

    def get_proxy_host(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "proxyHost")

    def set_proxy_port(self, opts: FileSystemOptions, port: int) -> None:
        check_port(port)
        self._set_param(opts, "proxyPort", port)

    def get_proxy_port(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "proxyPort", 0)

    def set_proxy_type(self, opts: FileSystemOptions, proxy_type: ProxyType) -> None:
        self._set_param(opts, "proxyType", proxy_type)

    def get_proxy_type(self, opts: Optional[FileSystemOptions]) -> Optional[ProxyType]:
        return self._get_param(opts, "proxyType")
