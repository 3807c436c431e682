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
import sys
from typing import Optional

from fsopts.coercion import ByteSize
from fsopts.lib.conversions import bytes2human
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)
from fsopts.provider.httpBuilder import check_non_negative


class RamFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options for the in-memory ram provider."""
    config_scope = "ram"
    config_options = option_table(
        ConfigOption("maxSize", ByteSize(), help="Most bytes the file system may hold, like 64MiB."),
    )

    def set_max_size(self, opts: FileSystemOptions, size: int) -> None:
        check_non_negative("maxSize", size)
        self._set_param(opts, "maxSize", size)

    def get_max_size(self, opts: Optional[FileSystemOptions]) -> int:
        return self._get_param(opts, "maxSize", sys.maxsize)

    def describe_max_size(self, opts: Optional[FileSystemOptions]) -> str:
        """Get the size limit for display, like '64.0 Mi'."""
        return bytes2human(self.get_max_size(opts))
