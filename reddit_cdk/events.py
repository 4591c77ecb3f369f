#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
from threading import Lock
from typing import Callable, List

logger = logging.getLogger("reddit_cdk")

Callback = Callable[[], None]


class AccessTokenExpiredNotifier:
    """
    Notifies subscribers that the access token expired and can not be renewed automatically.

    Subscribers are expected to re-authenticate the client out of band.
    """

    def __init__(self) -> None:
        self._callbacks: List[Callback] = []
        self._lock = Lock()

    def subscribe(self, callback: Callback) -> Callable[[], None]:
        """
        :param callback: called with no arguments on every expiry
        :return: a function removing the subscription
        """
        with self._lock:
            self._callbacks.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)

        return _unsubscribe

    def notify(self) -> None:
        with self._lock:
            callbacks = list(self._callbacks)
        logger.warning("Access token expired, notifying %s subscriber(s)", len(callbacks))
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Access token expired subscriber %r failed", callback)
