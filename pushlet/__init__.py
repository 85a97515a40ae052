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

import logging

from pushlet.aps import payload_for_message
from pushlet.config import Configuration
from pushlet.errors import PushError, TransportError, InvalidResponseError
from pushlet.pushtype import NotificationType
from pushlet.request import build_request
from pushlet.server import Server
from pushlet.task import PushTask, PushResult


__all__ = [
    "Pushlet", "Configuration", "Server", "NotificationType", "PushTask",
    "PushResult", "PushError", "TransportError", "InvalidResponseError",
]

logger = logging.getLogger(__name__)


class Pushlet:
    """
    This class is all that you should need to use in the majority of cases.
    Sending a push can be achieved using the send() or send_message() methods,
    which return straight away with a PushTask. To find out how the push went,
    pass a completion callback:

        def on_complete(result):
            if not result.successful():
                [handle result.error]

        config = Configuration(device_token, provider_token, 'com.example.app')
        pl = Pushlet(config, server='production')
        pl.send_message(u"Hello", completion=on_complete)
    """

    def __init__(self, configuration, server=Server.DEVELOPMENT, session=None):
        """
        Args:
            configuration: The Configuration to send every push with
            server: The Server to send to, or its name
                    ('production' / 'prod' or 'development' / 'sandbox')
            session: httpx.Client to send requests with. If not given, an
                     HTTP/2 client is created and closed by close().
        """
        if isinstance(server, str):
            server = Server.from_name(server)
        self.configuration = configuration
        self.server = server
        self.owns_session = session is None
        if session is None:
            session = httpx.Client(http2=True)
        self.session = session
        logger.info("Sending pushes to %s", self.server.host)

    def send(self, payload, push_type=NotificationType.ALERT, completion=None):
        """
        Starts sending a push and returns the PushTask for it. Failures are
        never raised from here: they are passed to the completion callback.
        Args:
            payload (str, bytes or dict): The JSON body of the push. Strings
                    are sent as they are and are not checked.
            push_type (NotificationType or str): Sent as apns-push-type
            completion (callable): called with a PushResult when done
        Throws:
            ValueError: If push_type is not a known push type
        """
        push_type = NotificationType.coerce(push_type)
        request = build_request(self.configuration, self.server, payload, push_type)
        return PushTask(self.session, request, completion)

    def send_message(self, message, completion=None):
        """
        Sends message as an alert with the default sound.
        """
        return self.send(payload_for_message(message), completion=completion)

    def close(self):
        if self.owns_session:
            self.session.close()
