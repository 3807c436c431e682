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
from fsopts.auth import (AuthenticationField,
                         StaticUserAuthenticator,
                         UserAuthenticationData)
from fsopts.test import FsoptsTest


class AuthenticatorTest(FsoptsTest):
    def test_static_authenticator(self):
        authenticator = StaticUserAuthenticator("CORP", "user", "secret")
        data = authenticator.request_authentication([AuthenticationField.USERNAME, AuthenticationField.PASSWORD])
        self.assertEqual(data.get_data(AuthenticationField.USERNAME), "user")
        self.assertEqual(data.get_data(AuthenticationField.PASSWORD), "secret")
        self.assertIsNone(data.get_data(AuthenticationField.DOMAIN))
        data.clean()
        self.assertIsNone(data.get_data(AuthenticationField.PASSWORD))

    def test_missing_fields_are_left_out(self):
        data = StaticUserAuthenticator(None, "user", None).request_authentication(list(AuthenticationField))
        self.assertIsNone(data.get_data(AuthenticationField.DOMAIN))
        self.assertEqual(data.get_data(AuthenticationField.USERNAME), "user")

    def test_equality_and_repr(self):
        a = StaticUserAuthenticator(None, "user", "secret")
        self.assertEqual(a, StaticUserAuthenticator(None, "user", "secret"))
        self.assertNotEqual(a, StaticUserAuthenticator(None, "user", "other"))
        self.assertEqual(len({a, StaticUserAuthenticator(None, "user", "secret")}), 1)
        self.assertNotIn("secret", repr(a))

    def test_authentication_data(self):
        data = UserAuthenticationData()
        data.set_data(AuthenticationField.DOMAIN, "CORP")
        data.set_data(AuthenticationField.DOMAIN, None)
        self.assertIsNone(data.get_data(AuthenticationField.DOMAIN))
