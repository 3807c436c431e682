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
from typing import TYPE_CHECKING, Callable

import fsopts.lib.plugins

if TYPE_CHECKING:
    from fsopts.provider.abstractConfigBuilder import FileSystemConfigBuilder

logger = logging.getLogger(__name__)

#####
# Plugin system/API
#####


def add_provider_factory(
    scheme: str, class_factory: Callable[[], type["FileSystemConfigBuilder"]]
) -> None:
    """
    Adds a provider's config builder to the registry for the given scheme.

    Takes effect for file system managers initialized afterwards.

    :param class_factory: A function that returns a config builder class (NOT an instance), which implements :class:`fsopts.provider.abstractConfigBuilder.FileSystemConfigBuilder`.
    """
    fsopts.lib.plugins.register_plugin("config_builder", scheme, class_factory)


def remove_provider_factory(scheme: str) -> None:
    """
    Removes the provider registered for the given scheme, if there is one.
    """
    fsopts.lib.plugins.remove_plugin("config_builder", scheme)


def get_provider_schemes() -> Sequence[str]:
    """
    Get the schemes of all the available providers.
    """
    return fsopts.lib.plugins.get_plugin_names("config_builder")


def get_provider_builder_class(scheme: str) -> type["FileSystemConfigBuilder"]:
    """
    Get a config builder class by scheme.

    :raises: KeyError if the scheme has no provider, and
             ImportError if the builder's class cannot be loaded.
    """
    return fsopts.lib.plugins.get_plugin("config_builder", scheme)()


#####
# Built-in providers
#####


def default_builder_factory():
    from fsopts.provider.defaultBuilder import DefaultFileSystemConfigBuilder

    return DefaultFileSystemConfigBuilder


def http_builder_factory():
    from fsopts.provider.httpBuilder import HttpFileSystemConfigBuilder

    return HttpFileSystemConfigBuilder


def webdav_builder_factory():
    from fsopts.provider.webdavBuilder import WebdavFileSystemConfigBuilder

    return WebdavFileSystemConfigBuilder


def sftp_builder_factory():
    from fsopts.provider.sftpBuilder import SftpFileSystemConfigBuilder

    return SftpFileSystemConfigBuilder


def ftp_builder_factory():
    from fsopts.provider.ftpBuilder import FtpFileSystemConfigBuilder

    return FtpFileSystemConfigBuilder


def ftps_builder_factory():
    from fsopts.provider.ftpBuilder import FtpsFileSystemConfigBuilder

    return FtpsFileSystemConfigBuilder


def zip_builder_factory():
    from fsopts.provider.zipBuilder import ZipFileSystemConfigBuilder

    return ZipFileSystemConfigBuilder


def ram_builder_factory():
    from fsopts.provider.ramBuilder import RamFileSystemConfigBuilder

    return RamFileSystemConfigBuilder


#####
# Registers all built-in providers
#####

for _scheme in ("file", "tar", "tgz", "tbz2", "gz", "bz2", "tmp", "res"):
    add_provider_factory(_scheme, default_builder_factory)
add_provider_factory("http", http_builder_factory)
add_provider_factory("https", http_builder_factory)
add_provider_factory("webdav", webdav_builder_factory)
add_provider_factory("webdavs", webdav_builder_factory)
add_provider_factory("sftp", sftp_builder_factory)
add_provider_factory("ftp", ftp_builder_factory)
add_provider_factory("ftps", ftps_builder_factory)
add_provider_factory("zip", zip_builder_factory)
add_provider_factory("jar", zip_builder_factory)
add_provider_factory("ram", ram_builder_factory)
