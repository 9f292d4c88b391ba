"""A process-wide load balancer."""

import logging
import random
import threading
from typing import List, Optional

logger = logging.getLogger(__name__)


class LoadBalancer:
    """Only one instance exists; get it through get_load_balancer()."""

    _instance: Optional["LoadBalancer"] = None
    _lock = threading.Lock()

    def __init__(self):
        self._servers: List[str] = [
            "Server.1",
            "Server.2",
            "Server.3",
            "Server.4",
            "Server.5",
        ]
        self._random = random.Random()

    @classmethod
    def get_load_balancer(cls) -> "LoadBalancer":
        # Double-checked locking: no lock once the instance exists
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    logger.debug("Creating LoadBalancer instance")
                    cls._instance = cls()
        return cls._instance

    @property
    def servers(self) -> List[str]:
        return list(self._servers)

    @property
    def server(self) -> str:
        """A randomly chosen server."""
        return self._random.choice(self._servers)
