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
"""Build a file system options bag from an options file and assignments, and print it."""
import logging
import sys
from argparse import ArgumentDefaultsHelpFormatter
from typing import List, Optional

from configargparse import ArgParser

from fsopts.config import (apply_options,
                           dump_options,
                           import_class,
                           load_options_file,
                           parse_assignment,
                           parse_str_list)
from fsopts.delegating import DelegatingFileSystemOptionsBuilder
from fsopts.errors import ConfigError
from fsopts.loggingOptions import add_logging_options, set_logging_from_options
from fsopts.manager import FileSystemManager
from fsopts.options import FileSystemOptions

logger = logging.getLogger(__name__)


def get_parser() -> ArgParser:
    parser = ArgParser(prog="fsopts apply", description=__doc__,
                       formatter_class=ArgumentDefaultsHelpFormatter)
    parser.add_argument("--optionsFile", dest="optionsFile", default=None, metavar="PATH",
                        env_var="FSOPTS_OPTIONS_FILE",
                        help="YAML file laid out as scheme -> option -> value, applied first.")
    parser.add_argument("--set", dest="assignments", action="append", default=[], metavar="SCHEME.OPTION=VALUE",
                        help="Set an option from text, e.g. --set http.proxyPort=8080. May be repeated.")
    parser.add_argument("--setList", dest="listAssignments", action="append", default=[],
                        metavar="SCHEME.OPTION=V1,V2",
                        help="Set an array option from comma separated text, "
                             "e.g. --setList sftp.identities=/id1,/id2. May be repeated.")
    parser.add_argument("--setClass", dest="classAssignments", action="append", default=[],
                        metavar="SCHEME.OPTION=MODULE:CLASS",
                        help="Set an option to a new instance of a class, "
                             "e.g. --setClass sftp.userInfo=fsopts.provider.sftpBuilder:TrustEveryoneUserInfo.")
    add_logging_options(parser)
    return parser


def build_options(options, delegate: DelegatingFileSystemOptionsBuilder) -> FileSystemOptions:
    """
    Apply the options file, then the --set, --setList and --setClass
    assignments, in that order, to a new bag.
    """
    opts = FileSystemOptions()
    if options.optionsFile:
        apply_options(delegate, opts, load_options_file(options.optionsFile), source=options.optionsFile)
    for assignment in options.assignments:
        scheme, name, value = parse_assignment(assignment)
        delegate.set_config_string(opts, scheme, name, value)
    for assignment in options.listAssignments:
        scheme, name, value = parse_assignment(assignment)
        delegate.set_config_strings(opts, scheme, name, parse_str_list(value))
    for assignment in options.classAssignments:
        scheme, name, value = parse_assignment(assignment)
        delegate.set_config_class(opts, scheme, name, import_class(value))
    return opts


def main(args: Optional[List[str]] = None) -> None:
    parser = get_parser()
    options = parser.parse_args(args)
    set_logging_from_options(options)

    with FileSystemManager() as fsm:
        delegate = DelegatingFileSystemOptionsBuilder(fsm)
        try:
            opts = build_options(options, delegate)
        except ConfigError as e:
            logger.error("%s (%s)", e, e.code)
            if e.__cause__ is not None:
                logger.debug("Caused by: %r", e.__cause__)
            sys.exit(1)
        except (ValueError, ImportError, AttributeError) as e:
            logger.error("%s", e)
            sys.exit(1)
    dump_options(opts, sys.stdout)
