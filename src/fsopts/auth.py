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
import enum
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional


class AuthenticationField(enum.Enum):
    DOMAIN = "domain"
    USERNAME = "username"
    PASSWORD = "password"


class UserAuthenticationData:
    """Credentials handed back by a :class:`UserAuthenticator`, keyed by field."""

    def __init__(self) -> None:
        self._data: Dict[AuthenticationField, str] = {}

    def set_data(self, field: AuthenticationField, value: Optional[str]) -> None:
        if value is None:
            self._data.pop(field, None)
        else:
            self._data[field] = value

    def get_data(self, field: AuthenticationField) -> Optional[str]:
        return self._data.get(field)

    def clean(self) -> None:
        """Forget all stored credentials."""
        self._data.clear()


class UserAuthenticator(ABC):
    """Something a provider can ask for credentials when it connects."""

    @abstractmethod
    def request_authentication(self, fields: Iterable[AuthenticationField]) -> UserAuthenticationData:
        """Return credentials for the requested fields."""
        raise NotImplementedError()


class StaticUserAuthenticator(UserAuthenticator):
    """Always answers with the same domain, user name and password."""

    def __init__(self, domain: Optional[str], username: Optional[str], password: Optional[str]) -> None:
        self.domain = domain
        self.username = username
        self.password = password

    def request_authentication(self, fields: Iterable[AuthenticationField]) -> UserAuthenticationData:
        values = {
            AuthenticationField.DOMAIN: self.domain,
            AuthenticationField.USERNAME: self.username,
            AuthenticationField.PASSWORD: self.password,
        }
        data = UserAuthenticationData()
        for field in fields:
            data.set_data(field, values[field])
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticUserAuthenticator):
            return NotImplemented
        return (self.domain, self.username, self.password) == (other.domain, other.username, other.password)

    def __hash__(self) -> int:
        return hash((self.domain, self.username, self.password))

    def __repr__(self) -> str:
        # Never show the password.
        return f"StaticUserAuthenticator(domain={self.domain!r}, username={self.username!r})"
