"""
Configuration loader for the keypad decoder.
Loads and validates the packaged global configuration file.
"""

import os
import json
from typing import Dict, Any, Optional, ClassVar

CONFIGS_DIR = os.path.join(os.path.dirname(__file__), "configs")
GLOBAL_CONFIG_PATH = os.path.join(CONFIGS_DIR, "global.json")


class ConfigLoader:
    """
    Configuration loader with caching for the global config.
    """

    _global_config_cache: ClassVar[Optional[Dict[str, Any]]] = None

    @staticmethod
    def load_global_config() -> Dict[str, Any]:
        """
        Load the global configuration from the module's GLOBAL_CONFIG_PATH, using cache if available.
        Returns:
            Dict[str, Any]: Parsed JSON content of the global configuration.
        Raises:
            FileNotFoundError: If the global configuration file does not exist.
            json.JSONDecodeError: If the file contains invalid JSON.
        """
        if ConfigLoader._global_config_cache is None:
            with open(GLOBAL_CONFIG_PATH, "r", encoding="utf-8") as f:
                ConfigLoader._global_config_cache = json.load(f)
        return ConfigLoader._global_config_cache

    @staticmethod
    def get_section(name: str) -> Dict[str, Any]:
        """
        Return one top-level section of the global configuration.
        Parameters:
            name (str): Section key, e.g. 'matching' or 'keypad'.
        Returns:
            Dict[str, Any]: The section, or an empty dict if the section is absent.
        """
        return ConfigLoader.load_global_config().get(name, {})

    @staticmethod
    def validate_config(
        config: Dict[str, Any], required_fields: list
    ) -> bool:
        """
        Validate that all required fields exist in the given configuration.
        Parameters:
            config (Dict[str, Any]): Configuration dictionary to check.
            required_fields (list): Sequence of field names that must be present in `config`.
        Returns:
            bool: `True` if all required fields are present.
        Raises:
            ValueError: If any required fields are missing; the exception message lists the missing fields.
        """
        missing = [field for field in required_fields if field not in config]
        if missing:
            raise ValueError(f"Missing required config fields: {missing}")
        return True

    @staticmethod
    def invalidate_cache() -> None:
        """
        Invalidate the global config cache (for testing or reload).
        """
        ConfigLoader._global_config_cache = None


# Example usage:
# matching = ConfigLoader.get_section("matching")
# ConfigLoader.validate_config(matching, ["threshold", "icon_size"])
