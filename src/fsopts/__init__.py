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
"""
Delegating configuration of file-system provider options.

Callers that only know a scheme and an option name as text (configuration
files, command line flags) can set options on a :class:`FileSystemOptions`
bag through :class:`DelegatingFileSystemOptionsBuilder`, which finds the
provider's config builder and converts the value to what its setter expects.
"""
from fsopts.version import distVersion

__version__ = distVersion
