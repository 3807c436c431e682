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
import io
import os
import textwrap
from pathlib import Path

from ruamel.yaml import YAML

from fsopts.config import (apply_options,
                           dump_options,
                           import_class,
                           load_options_file,
                           parse_assignment,
                           parse_str_list)
from fsopts.delegating import DelegatingFileSystemOptionsBuilder
from fsopts.errors import NoSuchOptionError, OptionsFileError, ValueCoercionError
from fsopts.options import FileSystemOptions
from fsopts.provider.sftpBuilder import TrustEveryoneUserInfo
from fsopts.test import FsoptsTest, ManagerTestCase


class OptionsFileTest(ManagerTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.delegate = DelegatingFileSystemOptionsBuilder(self.fsm)
        self.opts = FileSystemOptions()

    def _load(self, contents: str) -> dict:
        return load_options_file(self._writeFile("options.yaml", textwrap.dedent(contents)))

    def test_apply_file(self):
        options = self._load("""
            http:
              proxyHost: proxy
              proxyPort: 8080
              followRedirect: false
            sftp:
              identities: [/file1, /file2]
              userInfo:
                class: fsopts.provider.sftpBuilder:TrustEveryoneUserInfo
            ram:
              maxSize: 1 MiB
            """)
        apply_options(self.delegate, self.opts, options, source="options.yaml")

        http = self.fsm.resolve("http")
        self.assertEqual(http.get_proxy_host(self.opts), "proxy")
        self.assertEqual(http.get_proxy_port(self.opts), 8080)
        self.assertFalse(http.get_follow_redirect(self.opts))
        sftp = self.fsm.resolve("sftp")
        self.assertEqual(sftp.get_identities(self.opts), (Path("/file1"), Path("/file2")))
        self.assertIs(type(sftp.get_user_info(self.opts)), TrustEveryoneUserInfo)
        self.assertEqual(self.fsm.resolve("ram").get_max_size(self.opts), 1024 * 1024)

    def test_same_bag_as_direct_calls(self):
        apply_options(self.delegate, self.opts, {"http": {"proxyPort": 8080, "keepAlive": False},
                                                 "sftp": {"identities": ["/file1", "/file2"]}})
        direct = FileSystemOptions()
        self.delegate.set_config_string(direct, "http", "proxyPort", "8080")
        self.delegate.set_config_string(direct, "http", "keepAlive", "false")
        self.delegate.set_config_strings(direct, "sftp", "identities", ["/file1", "/file2"])
        self.assertEqual(self.opts, direct)

    def test_empty_file(self):
        self.assertEqual(self._load(""), {})

    def test_not_yaml(self):
        with self.assertRaises(OptionsFileError) as cm:
            self._load("http: [unclosed\n")
        self.assertEqual(cm.exception.code, "options-file-invalid")
        self.assertTrue(cm.exception.source.endswith("options.yaml"))

    def test_missing_file(self):
        path = os.path.join(self._createTempDir(), "missing.yaml")
        with self.assertRaises(OptionsFileError) as cm:
            load_options_file(path)
        self.assertEqual(cm.exception.source, path)
        self.assertIsInstance(cm.exception.__cause__, FileNotFoundError)

    def test_directory_instead_of_file(self):
        with self.assertRaises(OptionsFileError) as cm:
            load_options_file(self._createTempDir())
        self.assertIsInstance(cm.exception.__cause__, OSError)

    def test_undecodable_file(self):
        path = os.path.join(self._createTempDir(), "latin1.yaml")
        with open(path, "wb") as f:
            f.write("http:\n  proxyHost: caf\u00e9\n".encode("latin-1"))
        with self.assertRaises(OptionsFileError):
            load_options_file(path)

    def test_not_a_mapping(self):
        with self.assertRaises(OptionsFileError):
            self._load("- http\n- sftp\n")

    def test_bad_layout(self):
        for options in ({"http": "proxy"},
                        {"http": {"proxyHost": [["nested"]]}},
                        {"http": {"proxyHost": {"value": "proxy"}}},
                        {"sftp": {"userInfo": {"class": 5}}},
                        {"sftp": {"userInfo": {"class": "fsopts.no_such_module:Thing"}}},
                        {"sftp": {"userInfo": {"classes": "fsopts.provider.sftpBuilder:TrustEveryoneUserInfo"}}}):
            with self.assertRaises(OptionsFileError, msg=repr(options)):
                apply_options(self.delegate, self.opts, options)
        self.assertEqual(len(self.opts), 0)

    def test_error_names_the_option(self):
        with self.assertRaises(OptionsFileError) as cm:
            apply_options(self.delegate, self.opts, {"sftp": {"userInfo": {"class": "fsopts.no_such_module:Thing"}}},
                          source="site.yaml")
        self.assertIsInstance(cm.exception.__cause__, ImportError)
        self.assertEqual(cm.exception.option_name, "userInfo")
        self.assertIn("site.yaml, scheme 'sftp', option 'userInfo'", str(cm.exception))

    def test_option_errors_propagate(self):
        with self.assertRaises(NoSuchOptionError):
            apply_options(self.delegate, self.opts, {"http": {"proxy": "x"}})
        # Options before the failing one stay set.
        with self.assertRaises(ValueCoercionError):
            apply_options(self.delegate, self.opts, {"http": {"proxyHost": "proxy", "proxyPort": "eighty"}})
        self.assertEqual(self.fsm.resolve("http").get_proxy_host(self.opts), "proxy")

    def test_classes(self):
        apply_options(self.delegate, self.opts,
                      {"sftp": {"userInfo": {"classes": ["fsopts.provider.sftpBuilder.TrustEveryoneUserInfo"]}}})
        self.assertIsInstance(self.fsm.resolve("sftp").get_user_info(self.opts), TrustEveryoneUserInfo)

    def test_dump(self):
        apply_options(self.delegate, self.opts, {"http": {"proxyHost": "proxy", "proxyPort": 8080},
                                                 "sftp": {"identities": ["/file1"],
                                                          "userInfo": {"class": "fsopts.provider.sftpBuilder:"
                                                                                "TrustEveryoneUserInfo"}},
                                                 "ftp": {"fileType": "binary"}})
        stream = io.StringIO()
        dump_options(self.opts, stream)
        dumped = YAML(typ='safe', pure=True).load(stream.getvalue())
        self.assertEqual(dumped["http"], {"proxyHost": "proxy", "proxyPort": 8080})
        self.assertEqual(dumped["sftp"]["identities"], ["/file1"])
        self.assertIn("TrustEveryoneUserInfo", dumped["sftp"]["userInfo"])
        self.assertEqual(dumped["ftp"], {"fileType": "BINARY"})


class AssignmentTest(FsoptsTest):
    def test_parse_assignment(self):
        self.assertEqual(parse_assignment("ram.maxSize=64 MiB"), ("ram", "maxSize", "64 MiB"))
        self.assertEqual(parse_assignment("http.proxyHost="), ("http", "proxyHost", ""))
        for bad in ("http.proxyHost", ".proxyHost=x", "http.=x", "=x"):
            with self.assertRaises(ValueError):
                parse_assignment(bad)

    def test_parse_str_list(self):
        self.assertEqual(parse_str_list("/id1,/id2"), ["/id1", "/id2"])
        self.assertEqual(parse_str_list("/id1"), ["/id1"])

    def test_import_class(self):
        self.assertIs(import_class("fsopts.provider.sftpBuilder:TrustEveryoneUserInfo"), TrustEveryoneUserInfo)
        self.assertIs(import_class("fsopts.provider.sftpBuilder.TrustEveryoneUserInfo"), TrustEveryoneUserInfo)
        with self.assertRaises(ValueError):
            import_class("fsopts.provider.sftpBuilder:HOST_KEY_CHECKING_CHOICES")
        with self.assertRaises(ValueError):
            import_class("TrustEveryoneUserInfo")
        with self.assertRaises(ImportError):
            import_class("fsopts.no_such_module:Thing")
        with self.assertRaises(AttributeError):
            import_class("fsopts.provider.sftpBuilder:NoSuchThing")
