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
from functools import wraps
from threading import Lock
from typing import Any, Callable, Dict, Tuple


def sync_memoize(f: Callable[..., Any]) -> Callable[..., Any]:
    """
    Cache a function's result per positional arguments, calling it at most once
    per key even when several threads ask at the same time.

    Used for the shared config builder instances and for plugin discovery.
    Calls that raise are not cached.

    >>> calls = []
    >>> @sync_memoize
    ... def make(name):
    ...     calls.append(name)
    ...     return object()
    >>> make('a') is make('a')
    True
    >>> calls
    ['a']
    """
    memory: Dict[Tuple[Any, ...], Any] = {}
    lock = Lock()

    @wraps(f)
    def new_f(*args: Any) -> Any:
        try:
            return memory[args]
        except KeyError:
            # on cache misses, retry with lock held
            with lock:
                try:
                    return memory[args]
                except KeyError:
                    r = f(*args)
                    memory[args] = r
                    return r
    return new_f
