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
from typing import Optional, Tuple

from fsopts.coercion import ArrayOf, Boolean, EnumValue, Integer, Text
from fsopts.options import FileSystemOptions
from fsopts.provider.abstractConfigBuilder import (ConfigOption,
                                                   FileSystemConfigBuilder,
                                                   option_table)
from fsopts.provider.httpBuilder import check_non_negative


class FtpFileType(enum.Enum):
    ASCII = "ascii"
    BINARY = "binary"
    LOCAL = "local"
    EBCDIC = "ebcdic"


class FtpsMode(enum.Enum):
    IMPLICIT = "implicit"
    EXPLICIT = "explicit"


class FtpsDataChannelProtectionLevel(enum.Enum):
    # Clear, Safe, Confidential and Private, as named by RFC 2228.
    C = "clear"
    S = "safe"
    E = "confidential"
    P = "private"


class FtpFileSystemConfigBuilder(FileSystemConfigBuilder):
    """Options for the ftp provider."""
    config_scope = "ftp"
    config_options = option_table(
        ConfigOption("passiveMode", Boolean(), help="Whether to use passive mode data connections."),
        ConfigOption("userDirIsRoot", Boolean(), help="Whether paths are relative to the user's home."),
        ConfigOption("connectTimeout", Integer(), help="Connect timeout in milliseconds."),
        ConfigOption("dataTimeout", Integer(), help="Data connection timeout in milliseconds."),
        ConfigOption("soTimeout", Integer(), help="Socket read timeout in milliseconds."),
        ConfigOption("controlEncoding", Text(), help="Encoding of the control connection."),
        ConfigOption("fileType", EnumValue(FtpFileType), help="Transfer type: ascii, binary, local or ebcdic."),
        ConfigOption("serverLanguageCode", Text(), help="Language code used to parse listings."),
        ConfigOption("defaultDateFormat", Text(), help="Date format of older listing entries."),
        ConfigOption("recentDateFormat", Text(), help="Date format of recent listing entries."),
        ConfigOption("serverTimeZoneId", Text(), help="Time zone of the server's listings."),
        ConfigOption("shortMonthNames", ArrayOf(Text()), help="The twelve month abbreviations the server uses."),
        ConfigOption("autodetectUtf8", Boolean(), help="Whether to switch to UTF-8 if the server offers it."),
    )

    def set_passive_mode(self, opts: FileSystemOptions, passive: bool) -> None:
        self._set_param(opts, "passiveMode", passive)

    def get_passive_mode(self, opts: Optional[FileSystemOptions]) -> Optional[bool]:
        return self._get_param(opts, "passiveMode")

    def set_user_dir_is_root(self, opts: FileSystemOptions, user_dir_is_root: bool) -> None:
        self._set_param(opts, "userDirIsRoot", user_dir_is_root)

    def get_user_dir_is_root(self, opts: Optional[FileSystemOptions]) -> bool:
        return self._get_param(opts, "userDirIsRoot", True)

    def set_connect_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("connectTimeout", millis)
        self._set_param(opts, "connectTimeout", millis)

    def get_connect_timeout(self, opts: Optional[FileSystemOptions]) -> Optional[int]:
        return self._get_param(opts, "connectTimeout")

    def set_data_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("dataTimeout", millis)
        self._set_param(opts, "dataTimeout", millis)

    def get_data_timeout(self, opts: Optional[FileSystemOptions]) -> Optional[int]:
        return self._get_param(opts, "dataTimeout")

    def set_so_timeout(self, opts: FileSystemOptions, millis: int) -> None:
        check_non_negative("soTimeout", millis)
        self._set_param(opts, "soTimeout", millis)

    def get_so_timeout(self, opts: Optional[FileSystemOptions]) -> Optional[int]:
        return self._get_param(opts, "soTimeout")

    def set_control_encoding(self, opts: FileSystemOptions, encoding: str) -> None:
        self._set_param(opts, "controlEncoding", encoding)

    def get_control_encoding(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "controlEncoding")

    def set_file_type(self, opts: FileSystemOptions, file_type: FtpFileType) -> None:
        self._set_param(opts, "fileType", file_type)

    def get_file_type(self, opts: Optional[FileSystemOptions]) -> Optional[FtpFileType]:
        return self._get_param(opts, "fileType")

    def set_server_language_code(self, opts: FileSystemOptions, code: str) -> None:
        self._set_param(opts, "serverLanguageCode", code)

    def get_server_language_code(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "serverLanguageCode")

    def set_default_date_format(self, opts: FileSystemOptions, date_format: str) -> None:
        self._set_param(opts, "defaultDateFormat", date_format)

    def get_default_date_format(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "defaultDateFormat")

    def set_recent_date_format(self, opts: FileSystemOptions, date_format: str) -> None:
        self._set_param(opts, "recentDateFormat", date_format)

    def get_recent_date_format(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "recentDateFormat")

    def set_server_time_zone_id(self, opts: FileSystemOptions, zone_id: str) -> None:
        self._set_param(opts, "serverTimeZoneId", zone_id)

    def get_server_time_zone_id(self, opts: Optional[FileSystemOptions]) -> Optional[str]:
        return self._get_param(opts, "serverTimeZoneId")

    def set_short_month_names(self, opts: FileSystemOptions, names: Tuple[str, ...]) -> None:
        if len(names) != 12:
            raise ValueError(f"Expected 12 short month names, got {len(names)}")
        self._set_param(opts, "shortMonthNames", tuple(names))

    def get_short_month_names(self, opts: Optional[FileSystemOptions]) -> Optional[Tuple[str, ...]]:
        return self._get_param(opts, "shortMonthNames")

    def set_autodetect_utf8(self, opts: FileSystemOptions, autodetect: bool) -> None:
        self._set_param(opts, "autodetectUtf8", autodetect)

    def get_autodetect_utf8(self, opts: Optional[FileSystemOptions]) -> Optional[bool]:
        return self._get_param(opts, "autodetectUtf8")


class FtpsFileSystemConfigBuilder(FtpFileSystemConfigBuilder):
    """Options for the ftps provider: everything ftp takes, plus the TLS mode."""
    config_scope = "ftps"
    config_options = option_table(
        ConfigOption("ftpsMode", EnumValue(FtpsMode), help="implicit or explicit TLS."),
        ConfigOption("dataChannelProtectionLevel", EnumValue(FtpsDataChannelProtectionLevel),
                     help="PROT level for data connections: C, S, E or P."),
        inherit=FtpFileSystemConfigBuilder.config_options,
    )

    def set_ftps_mode(self, opts: FileSystemOptions, mode: FtpsMode) -> None:
        self._set_param(opts, "ftpsMode", mode)

    def get_ftps_mode(self, opts: Optional[FileSystemOptions]) -> FtpsMode:
        return self._get_param(opts, "ftpsMode", FtpsMode.EXPLICIT)

    def set_data_channel_protection_level(self, opts: FileSystemOptions,
                                          level: FtpsDataChannelProtectionLevel) -> None:
        self._set_param(opts, "dataChannelProtectionLevel", level)

    def get_data_channel_protection_level(self, opts: Optional[FileSystemOptions]) -> Optional[FtpsDataChannelProtectionLevel]:
        return self._get_param(opts, "dataChannelProtectionLevel")
