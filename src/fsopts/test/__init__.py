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
import datetime
import logging
import os
import shutil
import tempfile
import unittest
from typing import Any, List, Optional
from unittest.util import strclass

import pytz

from fsopts.manager import FileSystemManager

logger = logging.getLogger(__name__)


class FsoptsTest(unittest.TestCase):
    """
    A common base class for fsopts tests.

    Please have every test case directly or indirectly inherit this one.

    When running tests you may optionally set the FSOPTS_TEST_TEMP environment
    variable to the path of a directory where you want temporary test files be
    placed. Otherwise temporary files and directories are created in the
    system's default location and removed during class tear down.
    """

    _tempBaseDir: Optional[str] = None
    _tempDirs: List[str] = []

    def setup_method(self, method: Any) -> None:
        western = pytz.timezone('America/Los_Angeles')
        california_time = western.localize(datetime.datetime.now())
        timestamp = california_time.strftime("%b %d %Y %H:%M:%S:%f %Z")
        print(f"\n\n[TEST] {strclass(self.__class__)}:{self._testMethodName} ({timestamp})\n\n")

    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        tempBaseDir = os.environ.get('FSOPTS_TEST_TEMP', None)
        if tempBaseDir is not None:
            tempBaseDir = os.path.abspath(tempBaseDir)
            os.makedirs(tempBaseDir, exist_ok=True)
        cls._tempBaseDir = tempBaseDir
        cls._tempDirs = []

    @classmethod
    def tearDownClass(cls) -> None:
        if cls._tempBaseDir is None:
            while cls._tempDirs:
                tempDir = cls._tempDirs.pop()
                if os.path.exists(tempDir):
                    shutil.rmtree(tempDir)
        else:
            cls._tempDirs = []
        super().tearDownClass()

    def setUp(self) -> None:
        logger.info("Setting up %s ...", self.id())
        super().setUp()

    def tearDown(self) -> None:
        super().tearDown()
        logger.info("Tore down %s", self.id())

    def _createTempDir(self, purpose: Optional[str] = None) -> str:
        classname = strclass(type(self))
        if classname.startswith("fsopts.test."):
            classname = classname[len("fsopts.test."):]
        prefix = ["fsopts", "test", classname, self._testMethodName]
        if purpose:
            prefix.append(purpose)
        prefix.append('')
        temp_dir_path = os.path.realpath(tempfile.mkdtemp(dir=self._tempBaseDir, prefix="-".join(prefix)))
        self._tempDirs.append(temp_dir_path)
        return temp_dir_path

    def _writeFile(self, name: str, contents: str) -> str:
        """Write a file into a fresh temporary directory and return its path."""
        path = os.path.join(self._createTempDir(), name)
        with open(path, 'w') as f:
            f.write(contents)
        return path


class ManagerTestCase(FsoptsTest):
    """A test case with an initialized file system manager in self.fsm."""

    def setUp(self) -> None:
        super().setUp()
        self.fsm = FileSystemManager()
        self.fsm.init()
        self.addCleanup(self.fsm.close)
