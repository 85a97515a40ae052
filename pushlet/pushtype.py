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


# https://developer.apple.com/documentation/usernotifications/sending-notification-requests-to-apns
class NotificationType(enum.Enum):
    ALERT = 'alert'
    BACKGROUND = 'background'
    LOCATION = 'location'
    VOIP = 'voip'
    COMPLICATION = 'complication'
    FILEPROVIDER = 'fileprovider'
    MDM = 'mdm'
    LIVEACTIVITY = 'liveactivity'
    PUSHTOTALK = 'pushtotalk'
    WIDGETS = 'widgets'
    CONTROLS = 'controls'

    @property
    def header_value(self):
        return self.value

    @property
    def priority(self):
        # background pushes must be sent at low priority
        if self is NotificationType.BACKGROUND:
            return '5'
        return None

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Unknown apns-push-type: %r" % (value,)) from None
