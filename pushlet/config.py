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

import collections


class Configuration(collections.namedtuple(
        'Configuration', ['device_token', 'authorization_token', 'bundle_id'])):
    """
    The fixed details a client sends every push with.

    Args:
        device_token (str): hex token of the device to push to
        authorization_token (str): provider token, sent as a bearer token
        bundle_id (str): the app's bundle identifier, sent as the topic
    """
    __slots__ = ()
