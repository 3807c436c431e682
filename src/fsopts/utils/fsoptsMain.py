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
"""Entry point of the fsopts command, which hands off to one subcommand module."""
import os
import sys
import textwrap
import types
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from typing import Dict

from fsopts.version import version


def main() -> None:
    modules = loadModules()

    if len(sys.argv) < 2 or sys.argv[1] == '--help':
        printHelp(modules)
        sys.exit(0)

    cmd = sys.argv[1]
    if cmd == '--version':
        printVersion()
        sys.exit(0)

    try:
        module = modules[cmd]
    except KeyError:
        sys.stderr.write(f'Unknown option "{cmd}".  Pass --help to display usage information.\n')
        sys.exit(1)

    del sys.argv[1]
    module.main()


def loadModules() -> Dict[str, types.ModuleType]:
    """Map each subcommand name to the module whose main() runs it."""
    from fsopts.utils import fsoptsApply, fsoptsProviders

    return {'apply': fsoptsApply, 'providers': fsoptsProviders}


def printHelp(modules: Dict[str, types.ModuleType]) -> None:
    name = os.path.basename(sys.argv[0])
    descriptions = '\n        '.join(f'{cmd} - {(mod.__doc__ or "").strip()}' for cmd, mod in modules.items())
    print(textwrap.dedent(f"""
        Usage: {name} COMMAND ...
               {name} --help
               {name} COMMAND --help

        Where COMMAND is one of the following:

        {descriptions}
        """[1:]))


def printVersion() -> None:
    try:
        print(distribution_version('fsopts'))
    except PackageNotFoundError:
        print(f'Version gathered from fsopts.version: {version}')
