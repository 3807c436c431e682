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
"""List the registered schemes and the options their config builders take."""
import logging
import sys
from typing import List, Optional

from configargparse import ArgParser

from fsopts.errors import UnknownSchemeError
from fsopts.loggingOptions import add_logging_options, set_logging_from_options
from fsopts.manager import FileSystemManager

logger = logging.getLogger(__name__)


def describe_scheme(fsm: FileSystemManager, scheme: str) -> str:
    builder = fsm.resolve(scheme)
    lines = [f"{scheme} ({type(builder).__name__})"]
    for option in builder.config_options.values():
        line = f"    {option.name}: {option.value_type.describe()}"
        if option.help:
            line += f" - {option.help}"
        lines.append(line)
    return '\n'.join(lines)


def main(args: Optional[List[str]] = None) -> None:
    parser = ArgParser(prog="fsopts providers", description=__doc__)
    parser.add_argument("--scheme", dest="schemes", action="append", default=None,
                        help="Only describe this scheme. May be repeated.")
    add_logging_options(parser)
    options = parser.parse_args(args)
    set_logging_from_options(options)

    with FileSystemManager() as fsm:
        try:
            for scheme in options.schemes or fsm.schemes:
                print(describe_scheme(fsm, scheme))
        except UnknownSchemeError as e:
            logger.error("%s", e)
            sys.exit(1)
