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
from typing import Optional

from fsopts.auth import UserAuthenticator
from fsopts.coercion import Boolean, Instance, Integer, Text
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)
from fsopts.version import distVersion

DEFAULT_URL_CHARSET = "UTF-8"
DEFAULT_USER_AGENT = f"fsopts/{distVersion}"
DEFAULT_MAX_TOTAL_CONNECTIONS = 50
DEFAULT_MAX_CONNECTIONS_PER_HOST = 5


def check_port(port: int) -> None:
    if not 0 <= port <= 65535:
        raise ValueError(f"Port {port} is outside the range 0-65535")


def check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


class HttpFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options for the http and https providers."""
    config_scope = "http"
    config_options = option_table(
        ConfigOption("proxyHost", Text(), help="Host name of the proxy to connect through."),
        ConfigOption("proxyPort", Integer(), help="Port of the proxy."),
        ConfigOption("proxyAuthenticator", Instance(UserAuthenticator),
                     help="Credentials for the proxy."),
        ConfigOption("urlCharset", Text(), help="Charset used to encode URLs."),
        ConfigOption("userAgent", Text(), help="User-Agent header to send."),
        ConfigOption("followRedirect", Boolean(), help="Whether to follow redirects."),
        ConfigOption("preemptiveAuth", Boolean(), help="Whether to send credentials before being challenged."),
        ConfigOption("keepAlive", Boolean(), help="Whether to keep connections open between requests."),
        ConfigOption("maxTotalConnections", Integer(), help="Size of the connection pool."),
        ConfigOption("maxConnectionsPerHost", Integer(), help="Connections allowed to one host."),
        ConfigOption("connectionTimeout", Integer(), help="Connect timeout in milliseconds, 0 for none."),
        ConfigOption("soTimeout", Integer(), help="Socket read timeout in milliseconds, 0 for none."),
    )

    def set_proxy_host(self, opts: FileSystemOptions, host: str) -> None:
        self._set_param(opts, "proxyHost", host)

    def get_proxy_host(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "proxyHost")

    def set_proxy_port(self, opts: FileSystemOptions, port: int) -> None:
        check_port(port)
        self._set_param(opts, "proxyPort", port)

    def get_proxy_port(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "proxyPort", 0)

    def set_proxy_authenticator(self, opts: FileSystemOptions, authenticator: UserAuthenticator) -> None:
        self._set_param(opts, "proxyAuthenticator", authenticator)

    def get_proxy_authenticator(self, opts: Optional[FileSystemOptions]) -> Optional[UserAuthenticator]:
        return self._get_param(opts, "proxyAuthenticator")

    def set_url_charset(self, opts: FileSystemOptions, charset: str) -> None:
        self._set_param(opts, "urlCharset", charset)

    def get_url_charset(self, opts: Optional[FileSystemOptions]) -> str:
        return self._get_param(opts, "urlCharset", DEFAULT_URL_CHARSET)

    def set_user_agent(self, opts: FileSystemOptions, user_agent: str) -> None:
        self._set_param(opts, "userAgent", user_agent)

    def get_user_agent(self, opts: Optional[FileSystemOptions]) -> str:
        return self._get_param(opts, "userAgent", DEFAULT_USER_AGENT)

    def set_follow_redirect(self, opts: FileSystemOptions, follow: bool) -> None:
        self._set_param(opts, "followRedirect", follow)

    def get_follow_redirect(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "followRedirect", True)

    def set_preemptive_auth(self, opts: FileSystemOptions, preemptive: bool) -> None:
        self._set_param(opts, "preemptiveAuth", preemptive)

    def is_preemptive_auth(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "preemptiveAuth", False)

    def set_keep_alive(self, opts: FileSystemOptions, keep_alive: bool) -> None:
        self._set_param(opts, "keepAlive", keep_alive)

    def is_keep_alive(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "keepAlive", True)

    def set_max_total_connections(self, opts: FileSystemOptions, connections: int) -> None:
        if connections < 1:
            raise ValueError(f"maxTotalConnections must be at least 1, got {connections}")
        self._set_param(opts, "maxTotalConnections", connections)

    def get_max_total_connections(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "maxTotalConnections", DEFAULT_MAX_TOTAL_CONNECTIONS)

    def set_max_connections_per_host(self, opts: FileSystemOptions, connections: int) -> None:
        if connections < 1:
            raise ValueError(f"maxConnectionsPerHost must be at least 1, got {connections}")
        self._set_param(opts, "maxConnectionsPerHost", connections)

    def get_max_connections_per_host(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "maxConnectionsPerHost", DEFAULT_MAX_CONNECTIONS_PER_HOST)

    def set_connection_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("connectionTimeout", millis)
        self._set_param(opts, "connectionTimeout", millis)

    def get_connection_timeout(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "connectionTimeout", 0)

    def set_so_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("soTimeout", millis)
        self._set_param(opts, "soTimeout", millis)

    def get_so_timeout(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "soTimeout", 0)
