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

import httpx

from pushlet.aps import body_for_payload


def build_request(configuration, server, payload, push_type):
    """
    Builds the POST for a single push.

    Args:
        configuration (Configuration): token, provider token and topic
        server (Server): the APNs environment to send to
        payload (str, bytes or dict): the push body, see body_for_payload
        push_type (NotificationType): the apns-push-type to send as
    Returns:
        httpx.Request
    """
    headers = [('apns-push-type', push_type.header_value)]
    if push_type.priority is not None:
        headers.append(('apns-priority', push_type.priority))
    headers.append(('authorization', "bearer %s" % (configuration.authorization_token,)))
    headers.append(('apns-topic', configuration.bundle_id))

    return httpx.Request(
        'POST',
        server.url_for(configuration.device_token),
        headers=headers,
        content=body_for_payload(payload),
    )
