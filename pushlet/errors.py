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

import json


# https://developer.apple.com/documentation/usernotifications/handling-notification-responses-from-apns
BAD_COLLAPSE_ID = 'BadCollapseId'
BAD_DEVICE_TOKEN = 'BadDeviceToken'
BAD_EXPIRATION_DATE = 'BadExpirationDate'
BAD_MESSAGE_ID = 'BadMessageId'
BAD_PRIORITY = 'BadPriority'
BAD_TOPIC = 'BadTopic'
DEVICE_TOKEN_NOT_FOR_TOPIC = 'DeviceTokenNotForTopic'
DUPLICATE_HEADERS = 'DuplicateHeaders'
IDLE_TIMEOUT = 'IdleTimeout'
INVALID_PUSH_TYPE = 'InvalidPushType'
MISSING_DEVICE_TOKEN = 'MissingDeviceToken'
MISSING_TOPIC = 'MissingTopic'
PAYLOAD_EMPTY = 'PayloadEmpty'
TOPIC_DISALLOWED = 'TopicDisallowed'
BAD_CERTIFICATE = 'BadCertificate'
BAD_CERTIFICATE_ENVIRONMENT = 'BadCertificateEnvironment'
EXPIRED_PROVIDER_TOKEN = 'ExpiredProviderToken'
FORBIDDEN = 'Forbidden'
INVALID_PROVIDER_TOKEN = 'InvalidProviderToken'
MISSING_PROVIDER_TOKEN = 'MissingProviderToken'
BAD_PATH = 'BadPath'
METHOD_NOT_ALLOWED = 'MethodNotAllowed'
EXPIRED_TOKEN = 'ExpiredToken'
UNREGISTERED = 'Unregistered'
PAYLOAD_TOO_LARGE = 'PayloadTooLarge'
TOO_MANY_PROVIDER_TOKEN_UPDATES = 'TooManyProviderTokenUpdates'
TOO_MANY_REQUESTS = 'TooManyRequests'
INTERNAL_SERVER_ERROR = 'InternalServerError'
SERVICE_UNAVAILABLE = 'ServiceUnavailable'
SHUTDOWN = 'Shutdown'


class PushError(Exception):
    pass


class TransportError(PushError):
    """
    The request never got a response: the connection failed, timed out
    or the push was cancelled.
    """
    def __init__(self, cause):
        super().__init__("Push was not delivered to APNs: %r" % (cause,))
        self.cause = cause


class InvalidResponseError(PushError):
    """
    APNs answered but did not accept the push. The response and its body
    are kept so the caller can see why.
    """
    def __init__(self, response, body=None):
        self.response = response
        self.body = body
        self.status = getattr(response, 'status_code', None)
        self.reason = _reason_from_body(body)
        super().__init__(
            "APNs rejected push with status %s (%s)" % (self.status, self.reason)
        )


def _reason_from_body(body):
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if isinstance(parsed, dict):
        return parsed.get('reason')
    return None
