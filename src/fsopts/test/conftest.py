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
import pytest

import fsopts.lib.plugins
import fsopts.provider.registry  # noqa: F401 registers the built-in providers


@pytest.fixture(autouse=True)
def restore_plugin_registry():
    """Put back any provider registrations a test added or removed."""
    saved = {kind: dict(plugins) for kind, plugins in fsopts.lib.plugins._registry.items()}
    yield
    for kind, plugins in saved.items():
        fsopts.lib.plugins._registry[kind].clear()
        fsopts.lib.plugins._registry[kind].update(plugins)
