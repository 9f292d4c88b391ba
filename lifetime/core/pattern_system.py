"""Demo system for the pattern catalog."""

import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

CATEGORIES = ("creational", "structural", "behavioral")


@dataclass
class DemoConfig:
    """Configuration for a demo."""
    enabled: bool = True
    priority: int = 100  # Lower = listed and run first
    config: Dict[str, Any] = field(default_factory=dict)


class Demo(ABC):
    """Base class for all pattern demos."""

    def __init__(self, config: Optional[DemoConfig] = None):
        """
        Initialize the demo.

        Args:
            config: Demo configuration
        """
        self.config = config or DemoConfig()
        self.enabled = self.config.enabled

    @property
    @abstractmethod
    def name(self) -> str:
        """Demo name (unique identifier)."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable pattern name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Pattern intent."""
        pass

    @property
    @abstractmethod
    def category(self) -> str:
        """One of 'creational', 'structural' or 'behavioral'."""
        pass

    @property
    def version(self) -> str:
        """Demo version."""
        return "1.0.0"

    @property
    def participants(self) -> Dict[str, List[str]]:
        """
        Participants of the pattern.

        Returns:
            Dict mapping the GoF role to the classes that play it in this demo
        """
        return {}

    def initialize(self) -> bool:
        """
        Initialize the demo.
        Called when the demo is loaded.

        Returns:
            True if initialization succeeded
        """
        logger.debug(f"Initializing demo: {self.display_name}")
        return True

    def shutdown(self):
        """Cleanup when demo is unloaded."""
        logger.debug(f"Shutting down demo: {self.display_name}")

    def get_config_schema(self) -> Dict[str, Any]:
        """
        Get configuration schema for this demo.

        Returns:
            Dict describing configurable parameters
        """
        return {}

    def setting(self, key: str) -> Any:
        """Get a configured value, falling back to the schema default."""
        if key in self.config.config:
            return self.config.config[key]
        schema = self.get_config_schema()
        if key not in schema:
            raise KeyError(f"Demo {self.name} has no setting '{key}'")
        return schema[key].get("default")

    @abstractmethod
    def compute(self):
        """Print the demo's illustrative output."""
        pass

    def __repr__(self):
        return f"<Demo: {self.display_name} v{self.version} (enabled={self.enabled})>"


class DemoRegistry:
    """Registry for managing pattern demos."""

    def __init__(self):
        self._demos: Dict[str, Demo] = {}
        self._initialized = False

    def register(self, demo: Demo):
        """
        Register a demo.

        Args:
            demo: Demo instance to register
        """
        if demo.category not in CATEGORIES:
            raise ValueError(f"Demo {demo.name} has unknown category '{demo.category}'")

        if demo.name in self._demos:
            logger.warning(f"Demo {demo.name} already registered, replacing")

        self._demos[demo.name] = demo
        logger.info(f"Registered demo: {demo.display_name} v{demo.version}")

    def unregister(self, demo_name: str):
        """Unregister a demo."""
        if demo_name in self._demos:
            demo = self._demos[demo_name]
            demo.shutdown()
            del self._demos[demo_name]
            logger.info(f"Unregistered demo: {demo_name}")

    def clear(self):
        """Unregister every demo."""
        for demo_name in list(self._demos):
            self.unregister(demo_name)
        self._initialized = False

    def get(self, demo_name: str) -> Optional[Demo]:
        """Get a demo by name."""
        return self._demos.get(demo_name)

    def get_all(self) -> List[Demo]:
        """Get all registered demos in priority order."""
        return sorted(self._demos.values(), key=lambda d: (d.config.priority, d.name))

    def get_enabled(self) -> List[Demo]:
        """Get all enabled demos in priority order."""
        return [d for d in self.get_all() if d.enabled]

    def get_by_category(self, category: str) -> List[Demo]:
        """Get enabled demos of one category."""
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        return [d for d in self.get_enabled() if d.category == category]

    def initialize_all(self) -> bool:
        """
        Initialize all enabled demos in priority order.

        Returns:
            True if all demos initialized successfully
        """
        if self._initialized:
            logger.warning("Demos already initialized")
            return True

        demos = self.get_enabled()

        for demo in demos:
            try:
                if not demo.initialize():
                    logger.error(f"Failed to initialize demo: {demo.name}")
                    return False
            except Exception as e:
                logger.error(f"Error initializing demo {demo.name}: {e}")
                return False

        self._initialized = True
        logger.info(f"Initialized {len(demos)} demos")
        return True

    def shutdown_all(self):
        """Shutdown all demos."""
        for demo in self._demos.values():
            try:
                demo.shutdown()
            except Exception as e:
                logger.error(f"Error shutting down demo {demo.name}: {e}")

        self._initialized = False

    def run(self, demo_name: str):
        """
        Run a single demo.

        Args:
            demo_name: Name of the demo to run

        Raises:
            KeyError: If no such demo is registered
            RuntimeError: If the demo is disabled
        """
        demo = self._demos.get(demo_name)
        if demo is None:
            raise KeyError(f"Unknown demo: {demo_name}")
        if not demo.enabled:
            raise RuntimeError(f"Demo {demo_name} is disabled")

        logger.info(f"Running demo: {demo.display_name}")
        print(f"\n\n{demo.display_name} Pattern\n")
        demo.compute()

    def get_demo_info(self) -> List[Dict[str, Any]]:
        """Get information about all demos."""
        return [
            {
                "name": d.name,
                "display_name": d.display_name,
                "description": d.description,
                "category": d.category,
                "version": d.version,
                "priority": d.config.priority,
                "enabled": d.enabled,
            }
            for d in self.get_all()
        ]


# Global demo registry instance
registry = DemoRegistry()
