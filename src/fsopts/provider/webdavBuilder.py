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

from fsopts.coercion import Boolean, Text
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import ConfigOption, option_table
from fsopts.provider.httpBuilder import HttpFileSystemConfigBuilder


class WebdavFileSystemConfigBuilder(HttpFileSystemConfigBuilder):
    """
    Options for the webdav providers.

    Takes every HTTP option, but keeps them in its own scope, so setting the
    webdav proxy does not change the plain HTTP one.
    """
    config_scope = "webdav"
    config_options = option_table(
        ConfigOption("versioning", Boolean(), help="Whether to check files in and out through versioning."),
        ConfigOption("creatorName", Text(), help="Creator recorded on versioned resources."),
        inherit=HttpFileSystemConfigBuilder.config_options,
    )

    def set_versioning(self, opts: FileSystemOptions, versioning: bool) -> None:
        self._set_param(opts, "versioning", versioning)

    def is_versioning(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "versioning", False)

    def set_creator_name(self, opts: FileSystemOptions, creator_name: str) -> None:
        self._set_param(opts, "creatorName", creator_name)

    def get_creator_name(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "creatorName")
