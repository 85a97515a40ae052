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

import gevent
import gevent.event
import httpx

import logging

from pushlet.errors import TransportError, InvalidResponseError


logger = logging.getLogger(__name__)


class PushResult:
    """
    What a push ended with: either the 200 response from APNs or the
    PushError that explains why there wasn't one.
    """
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error

    def successful(self):
        return self.error is None

    def get(self):
        """
        Returns the response, or raises the error if the push failed.
        """
        if self.error is not None:
            raise self.error
        return self.response

    def __repr__(self):
        if self.error is not None:
            return "<PushResult error=%r>" % (self.error,)
        return "<PushResult status=%s>" % (self.response.status_code,)


class PushTask:
    """
    A single push in flight. The push starts as soon as the task is
    created; the completion callback is called exactly once with the
    PushResult, from the task's own greenlet (or from cancel() if the
    task is cancelled before it got going).
    """

    def __init__(self, session, request, completion=None):
        self.session = session
        self.request = request
        self.completion = completion
        self.result = None
        self._finished = False
        self._done = gevent.event.Event()
        self._greenlet = gevent.spawn(self._run)

    def _run(self):
        logger.info("Sending push to %s", self.request.url)
        try:
            # httpx blocks, so the exchange happens on the hub's thread
            # pool and only this greenlet waits for it
            response = gevent.get_hub().threadpool.apply(self._exchange)
        except gevent.GreenletExit as e:
            logger.info("Push to %s cancelled", self.request.url)
            self._finish(PushResult(error=TransportError(e)))
            return
        except Exception as e:
            logger.exception("Caught exception sending push")
            self._finish(PushResult(error=TransportError(e)))
            return

        try:
            result = self._classify(response)
        except Exception:
            logger.exception("Caught exception reading push response")
            result = PushResult(response=response, error=InvalidResponseError(response))
        self._finish(result)

    def _exchange(self):
        # not streamed, so the body has been read by the time this returns
        return self.session.send(self.request)

    def _classify(self, response):
        if not isinstance(response, httpx.Response) or response.status_code != 200:
            body = getattr(response, 'content', None)
            error = InvalidResponseError(response, body)
            logger.warning(
                "Push to %s failed with status %s: %s",
                self.request.url, error.status, error.reason
            )
            return PushResult(response=response, error=error)

        logger.info("Push to %s accepted (apns-id %s)",
                    self.request.url, response.headers.get('apns-id'))
        return PushResult(response=response)

    def _finish(self, result):
        if self._finished:
            return
        self._finished = True
        self.result = result
        try:
            if self.completion is not None:
                self.completion(result)
        except Exception:
            logger.exception("Caught exception in push completion callback")
        finally:
            self._done.set()

    def cancel(self):
        """
        Stops the push if it hasn't finished. The completion callback gets
        a TransportError caused by GreenletExit.
        Returns False if the push had already finished.
        """
        if self._finished:
            return False
        self._greenlet.kill()
        # a greenlet killed before it started never runs _run
        if not self._finished:
            logger.info("Push to %s cancelled before sending", self.request.url)
            self._finish(PushResult(error=TransportError(gevent.GreenletExit())))
        return True

    def ready(self):
        return self._finished

    def join(self, timeout=None):
        """
        Blocks the current greenlet until the push has finished and its
        completion callback has returned. Returns False on timeout.
        """
        return self._done.wait(timeout)

    def get(self, timeout=None):
        if not self.join(timeout):
            raise gevent.Timeout(timeout)
        return self.result.get()
