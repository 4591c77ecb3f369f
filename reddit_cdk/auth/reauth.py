#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
from threading import Lock
from typing import Callable

logger = logging.getLogger("reddit_cdk.auth")


class SerializedReauthenticator:
    """
    Serializes the reauthentication of one auth provider.

    Every successful reauthentication bumps `generation`. A caller passes the generation it saw
    before sending its request; if another caller reauthenticated in the meantime the token it
    obtained is reused instead of asking reddit for yet another one.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._lock = Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def reauthenticate(self, action: Callable[[], None], observed_generation: int) -> bool:
        """
        :param action: the provider call obtaining a new token
        :param observed_generation: generation seen when the rejected request was built
        :return: True if `action` was performed, False if a concurrent reauthentication was reused
        """
        with self._lock:
            if self._generation != observed_generation:
                logger.debug(
                    "Reusing token from concurrent %s reauthentication (generation %s)",
                    self._name,
                    self._generation,
                )
                return False
            logger.info("Reauthenticating %s", self._name)
            action()
            self._generation += 1
            return True
