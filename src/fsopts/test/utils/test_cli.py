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
from contextlib import redirect_stdout
from typing import Optional, Tuple
from unittest import mock

from ruamel.yaml import YAML

from fsopts.test import FsoptsTest
from fsopts.utils import fsoptsApply, fsoptsMain, fsoptsProviders
from fsopts.version import distVersion


class ApplyTest(FsoptsTest):
    def _apply(self, *args: str) -> dict:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            fsoptsApply.main(list(args))
        return YAML(typ='safe', pure=True).load(stdout.getvalue()) or {}

    def test_assignments(self):
        dumped = self._apply("--set", "http.proxyHost=proxy",
                             "--set", "http.proxyPort=8080",
                             "--setList", "sftp.identities=/id1,/id2",
                             "--setClass", "sftp.userInfo=fsopts.provider.sftpBuilder:TrustEveryoneUserInfo")
        self.assertEqual(dumped["http"], {"proxyHost": "proxy", "proxyPort": 8080})
        self.assertEqual(dumped["sftp"]["identities"], ["/id1", "/id2"])
        self.assertIn("TrustEveryoneUserInfo", dumped["sftp"]["userInfo"])

    def test_assignments_override_options_file(self):
        path = self._writeFile("options.yaml", "http:\n  proxyHost: from-file\n  proxyPort: 3128\n")
        dumped = self._apply("--optionsFile", path, "--set", "http.proxyHost=from-flag")
        self.assertEqual(dumped["http"], {"proxyHost": "from-flag", "proxyPort": 3128})

    def test_options_file_from_environment(self):
        path = self._writeFile("options.yaml", "zip:\n  charset: latin-1\n")
        with mock.patch.dict(os.environ, {"FSOPTS_OPTIONS_FILE": path}):
            dumped = self._apply()
        self.assertEqual(dumped, {"zip": {"charset": "latin-1"}})

    def test_nothing_to_apply(self):
        self.assertEqual(self._apply(), {})

    def test_failures_exit(self):
        for args in (["--set", "http.proxyPort=wrong_port"],
                     ["--set", "gopher.selector=/"],
                     ["--set", "proxyPort=8080"],
                     ["--setClass", "sftp.userInfo=fsopts.no_such_module:Thing"],
                     ["--optionsFile", os.path.join(self._createTempDir(), "missing.yaml")],
                     ["--optionsFile", self._writeFile("bad.yaml", "- not\n- a mapping\n")]):
            with self.assertRaises(SystemExit, msg=repr(args)) as cm:
                self._apply(*args)
            self.assertEqual(cm.exception.code, 1)


    def test_missing_options_file(self):
        path = os.path.join(self._createTempDir(), "missing.yaml")
        with self.assertLogs("fsopts.utils.fsoptsApply", level="ERROR") as logs:
            with self.assertRaises(SystemExit) as cm:
                self._apply("--optionsFile", path)
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("options-file-invalid", logs.output[0])
        self.assertIn(path, logs.output[0])


class ProvidersTest(FsoptsTest):
    def _providers(self, *args: str) -> str:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            fsoptsProviders.main(list(args))
        return stdout.getvalue()

    def test_describe_one_scheme(self):
        output = self._providers("--scheme", "ram")
        self.assertIn("ram (RamFileSystemConfigBuilder)", output)
        self.assertIn("maxSize: byte size", output)

    def test_describe_all(self):
        output = self._providers()
        for scheme in ("file", "http", "sftp", "webdavs", "jar"):
            self.assertIn(f"\n{scheme} (", "\n" + output)
        self.assertIn("userInfo: UserInfo capability", output)
        self.assertIn("identities: array of path", output)

    def test_unknown_scheme(self):
        with self.assertRaises(SystemExit) as cm:
            self._providers("--scheme", "gopher")
        self.assertEqual(cm.exception.code, 1)


class MainTest(FsoptsTest):
    def _main(self, *argv: str) -> Tuple[Optional[int], str]:
        """Run the fsopts command with the given arguments, returning its exit code and output."""
        stdout = io.StringIO()
        code = None
        with mock.patch("sys.argv", ["fsopts", *argv]), redirect_stdout(stdout):
            try:
                fsoptsMain.main()
            except SystemExit as e:
                code = e.code
        return code, stdout.getvalue()

    def test_commands(self):
        self.assertEqual(sorted(fsoptsMain.loadModules()), ["apply", "providers"])

    def test_help(self):
        code, output = self._main("--help")
        self.assertEqual(code, 0)
        self.assertIn("apply - Build a file system options bag", output)
        self.assertIn("providers - List the registered schemes", output)

    def test_version(self):
        code, output = self._main("--version")
        self.assertEqual(code, 0)
        self.assertIn(distVersion, output)

    def test_dispatch(self):
        code, output = self._main("providers", "--scheme", "zip")
        self.assertIsNone(code)
        self.assertIn("charset: text", output)

    def test_unknown_command(self):
        code, _ = self._main("frobnicate")
        self.assertEqual(code, 1)
