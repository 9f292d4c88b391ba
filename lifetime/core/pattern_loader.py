"""Demo loader for loading pattern demos from configuration."""

import logging
import yaml
import importlib
from pathlib import Path
from typing import Dict, List
from .pattern_system import DemoConfig, registry

logger = logging.getLogger(__name__)

PATTERNS_DIR = Path(__file__).parent.parent / "patterns"


def demo_class_name(demo_name: str) -> str:
    """Class exported by a demo package, e.g. 'factory_method' -> 'FactoryMethodDemo'."""
    return f"{demo_name.replace('_', ' ').title().replace(' ', '')}Demo"


class DemoLoader:
    """Loads and initializes pattern demos from configuration."""

    def __init__(self, config_path: str = "demos_config.yaml", demo_registry=None):
        """
        Initialize the demo loader.

        Args:
            config_path: Path to demos configuration file
            demo_registry: Registry to load into (defaults to the global one)
        """
        self.config_path = Path(config_path)
        self.registry = demo_registry if demo_registry is not None else registry
        self.config = {}

    def load_config(self) -> Dict:
        """Load demo configuration from YAML file."""
        if not self.config_path.exists():
            logger.warning(f"Demo config not found: {self.config_path}, using defaults")
            self.config = {"demos": {}, "demo_settings": {}}
            return self.config

        with open(self.config_path, 'r') as f:
            self.config = yaml.safe_load(f) or {}

        self.config.setdefault("demos", {})
        self.config.setdefault("demo_settings", {})

        logger.info(f"Loaded demo configuration from {self.config_path}")
        return self.config

    def get_available_demos(self) -> List[str]:
        """
        Discover available demos in the patterns directory.

        Returns:
            Sorted list of demo names
        """
        if not PATTERNS_DIR.exists():
            logger.warning(f"Patterns directory not found: {PATTERNS_DIR}")
            return []

        available = sorted(
            demo_dir.name
            for demo_dir in PATTERNS_DIR.iterdir()
            if demo_dir.is_dir()
            and not demo_dir.name.startswith('_')
            and (demo_dir / "module.py").exists()
        )

        logger.debug(f"Found {len(available)} available demos: {available}")
        return available

    def load_demo(self, demo_name: str, demo_config: Dict) -> bool:
        """
        Load a single demo.

        Args:
            demo_name: Name of the demo to load
            demo_config: Demo configuration dict

        Returns:
            True if demo loaded successfully
        """
        try:
            demo_package = importlib.import_module(f"lifetime.patterns.{demo_name}")

            class_name = demo_class_name(demo_name)

            if not hasattr(demo_package, class_name):
                logger.error(f"Demo {demo_name} does not export {class_name}")
                return False

            demo_class = getattr(demo_package, class_name)

            config = DemoConfig(
                enabled=demo_config.get('enabled', True),
                priority=demo_config.get('priority', 100),
                config=demo_config.get('config') or {},
            )

            self.registry.register(demo_class(config))

            logger.debug(f"Loaded demo: {demo_name}")
            return True

        except Exception as e:
            logger.error(f"Failed to load demo {demo_name}: {e}")
            return False

    def load_all_demos(self) -> bool:
        """
        Load all enabled demos from configuration.

        Returns:
            True if all demos loaded and initialized successfully
        """
        config = self.load_config()
        demos_config = config.get('demos', {})
        demo_settings = config.get('demo_settings', {})

        loaded = 0
        failed = 0

        for demo_name in self.get_available_demos():
            demo_config = demos_config.get(demo_name) or {}

            # Skip if explicitly disabled
            if not demo_config.get('enabled', True):
                logger.info(f"Skipping disabled demo: {demo_name}")
                continue

            if self.load_demo(demo_name, demo_config):
                loaded += 1
            else:
                failed += 1
                if demo_settings.get('fail_on_error', False):
                    logger.error("Failing due to demo load error (fail_on_error=true)")
                    return False

        logger.info(f"Demo loading complete: {loaded} loaded, {failed} failed")

        if not self.registry.initialize_all():
            logger.error("Failed to initialize demos")
            return False

        return failed == 0

    def reload_demo(self, demo_name: str) -> bool:
        """
        Reload a demo with its current configuration.

        Args:
            demo_name: Name of demo to reload

        Returns:
            True if reload successful
        """
        self.registry.unregister(demo_name)

        config = self.load_config()
        demo_config = config.get('demos', {}).get(demo_name) or {}

        return self.load_demo(demo_name, demo_config)

    def get_demo_status(self) -> Dict:
        """
        Get status of all demos.

        Returns:
            Dict with demo status information
        """
        return {
            "total_demos": len(self.registry.get_all()),
            "enabled_demos": len(self.registry.get_enabled()),
            "demos": self.registry.get_demo_info(),
        }
