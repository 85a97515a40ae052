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

import json.encoder

# The same encoder configuration is used for every push so
# we keep one around rather than have the json module build
# a new one each time.
#
# ensure_ascii=False gives literal UTF-8 rather than \u escapes
# and the separators drop the spaces json puts in by default:
# both keep the body as short as it can be.
jsonencoder = json.encoder.JSONEncoder(
    ensure_ascii=False,
    separators=(',', ':')
)


def json_for_payload(payload):
    return jsonencoder.encode(payload).encode('utf8')


def payload_for_message(message):
    """
    Returns the body for a plain alert with the default sound.
    The message is escaped like any other JSON string.
    """
    return json_for_payload({
        'aps': {
            'alert': message,
            'sound': 'default',
        }
    })


def body_for_payload(payload):
    """
    Args:
        payload (str, bytes or dict): A JSON string, pre-encoded JSON or a
            payload dictionary. Strings are sent as they are, without
            checking that they are valid JSON.
    """
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode('utf8')
    return json_for_payload(payload)
