# Copyright 2015 OpenMarket Ltd
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


class Server(enum.Enum):
    """
    The APNs environments. Each member's value is the gateway hostname.
    """
    PRODUCTION = 'api.push.apple.com'
    DEVELOPMENT = 'api.sandbox.push.apple.com'

    @property
    def host(self):
        return self.value

    def url_for(self, device_token):
        return "https://%s/3/device/%s" % (self.host, device_token)

    @classmethod
    def from_name(cls, name):
        """
        Looks up a server by name: 'production' / 'prod' or
        'development' / 'sandbox'.
        """
        try:
            return _NAMES[name.lower()]
        except KeyError:
            raise ValueError("Unknown APNs server: %r" % (name,)) from None


_NAMES = {
    'production': Server.PRODUCTION,
    'prod': Server.PRODUCTION,
    'development': Server.DEVELOPMENT,
    'sandbox': Server.DEVELOPMENT,
}
