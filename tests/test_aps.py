# -*- coding: utf-8 -*-
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
import unittest

from pushlet.aps import json_for_payload, payload_for_message, body_for_payload


class ApsTestCase(unittest.TestCase):
    def test_efficient_multibyte(self):
        txt = u"\U0001F414"
        payload = {
            'aps': {
                'alert': txt
            }
        }
        json_with_multibyte = json_for_payload(payload)
        # Shortest encoding uses literal UTF8, not \u escape sequences, and
        # doesn't put unneccesary space after commas and colons.
        shortest_encoding = u"{\"aps\":{\"alert\":\"\U0001F414\"}}".encode('utf8')

        self.assertEqual(shortest_encoding, json_with_multibyte)

    def test_message_template(self):
        self.assertEqual(
            {'aps': {'alert': 'hi', 'sound': 'default'}},
            json.loads(payload_for_message('hi'))
        )

    def test_message_is_escaped(self):
        message = u'say "hi" \\ bye'
        body = payload_for_message(message)
        self.assertEqual(message, json.loads(body)['aps']['alert'])

    def test_string_payload_sent_verbatim(self):
        # not valid JSON, but not our problem
        self.assertEqual(b'{"aps":', body_for_payload('{"aps":'))
        self.assertEqual(u'{"a":"é"}'.encode('utf8'), body_for_payload(u'{"a":"é"}'))

    def test_bytes_payload_unchanged(self):
        self.assertEqual(b'{}', body_for_payload(b'{}'))

    def test_dict_payload_encoded(self):
        self.assertEqual(b'{"aps":{"badge":1}}', body_for_payload({'aps': {'badge': 1}}))
