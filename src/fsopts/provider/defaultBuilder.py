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
from fsopts.coercion import Instance
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)


class DefaultFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options shared by providers that have no builder of their own, like file and tar."""
    config_scope = "default"
    config_options = option_table(
        ConfigOption("userAuthenticator", Instance(UserAuthenticator),
                     help="Authenticator asked for credentials when connecting."),
    )

    def set_user_authenticator(self, opts: FileSystemOptions, authenticator: UserAuthenticator) -> None:
        self._set_param(opts, "userAuthenticator", authenticator)

    def get_user_authenticator(self, opts: Optional[FileSystemOptions]) -> Optional[UserAuthenticator]:
        return self._get_param(opts, "userAuthenticator")
