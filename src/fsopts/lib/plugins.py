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
import importlib
import logging
import pkgutil
from typing import Any, Literal

from fsopts.lib.memoize import sync_memoize

logger = logging.getLogger(__name__)

PluginType = Literal["config_builder"]
plugin_types: list[PluginType] = ["config_builder"]

_registry: dict[str, dict[str, Any]] = {k: {} for k in plugin_types}


def register_plugin(
    plugin_type: PluginType, plugin_name: str, plugin_being_registered: Any
) -> None:
    """
    Adds a plugin to the registry for the given type of plugin.
    """
    _registry[plugin_type][plugin_name] = plugin_being_registered


def remove_plugin(
    plugin_type: PluginType, plugin_name: str) -> None:
    """
    Removes a plugin from the registry for the given type of plugin.
    """
    try:
        del _registry[plugin_type][plugin_name]
    except KeyError:
        # If the plugin does not exist, it can be ignored
        pass


def get_plugin_names(plugin_type: PluginType) -> list[str]:
    """
    Get the names of all the available plugins.
    """
    _load_all_plugins(plugin_type)
    return list(_registry[plugin_type].keys())


def get_plugin(plugin_type: PluginType, plugin_name: str) -> Any:
    """
    Get a plugin by name.

    :raises: KeyError if the key is not the name of a plugin.
    """
    return _registry[plugin_type][plugin_name]


def _plugin_name_prefix(plugin_type: PluginType) -> str:
    """
    Get prefix for plugin type.

    Any packages with prefix will count as fsopts plugins of that type. A
    config builder plugin is therefore a distribution shipping a top-level
    module named like ``fsopts_provider_<something>``.
    """
    return {"config_builder": "fsopts_provider_"}[plugin_type]


@sync_memoize
def _load_all_plugins(plugin_type: PluginType) -> None:
    """
    Load all the plugins of the given type that are installed.
    """
    prefix = _plugin_name_prefix(plugin_type)
    for finder, name, is_pkg in pkgutil.iter_modules():
        # For all installed packages
        if name.startswith(prefix):
            # If it is an fsopts plugin of this type, import it so it can
            # register itself.
            logger.debug("Loading %s plugin module %s", plugin_type, name)
            importlib.import_module(name)
