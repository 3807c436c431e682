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
import codecs
from typing import Optional

from fsopts.coercion import Text
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)

DEFAULT_CHARSET = "UTF-8"


class ZipFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options for the zip and jar providers."""
    config_scope = "zip"
    config_options = option_table(
        ConfigOption("charset", Text(), help="Encoding of entry names inside the archive."),
    )

    def set_charset(self, opts: FileSystemOptions, charset: str) -> None:
        # Raises LookupError for codecs Python does not know.
        codecs.lookup(charset)
        self._set_param(opts, "charset", charset)

    def get_charset(self, opts: Optional[FileSystemOptions]) -> str:
        return self._get_param(opts, "charset", DEFAULT_CHARSET)
