"""Configuration persistence manager for the bead pattern generator.

This module handles loading and saving of pattern settings to/from JSON files.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from bead_pattern.models import AUTO, CONFIG_FILE, Palette, PatternConfig, RenderStyle
from bead_pattern.palettes import DEFAULT_PALETTE, load_palette


class ConfigManager:
    """Handles loading and saving of pattern configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.bead_pattern_config.json)
        """
        self.config_path = config_path

    def load(self) -> PatternConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            PatternConfig with loaded or default values
        """
        config = PatternConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    if not isinstance(data, dict):
                        raise ValueError("config root must be a JSON object")
                    # Update config with loaded values (fallback to defaults)
                    config.grid_width = int(data.get("grid_width", config.grid_width))
                    height = data.get("grid_height", config.grid_height)
                    config.grid_height = AUTO if height == AUTO else int(height)
                    config.cell_size = int(data.get("cell_size", config.cell_size))
                    config.render_style = RenderStyle(
                        data.get("render_style", config.render_style.value)
                    )
                    config.show_labels = bool(data.get("show_labels", config.show_labels))
                    config.palette_file = data.get("palette_file", config.palette_file)
                print(f"✓ Loaded configuration from {self.config_path}")
        except (OSError, ValueError, TypeError) as e:
            print(f"Warning: Could not load config file: {e}")
            config = PatternConfig()

        return config

    def save(self, config: PatternConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: PatternConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = asdict(config)
        data["render_style"] = config.render_style.value
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)

    def load_palette(self, config: PatternConfig) -> Palette:
        """Palette named by the config, or the default bead palette.

        Raises:
            OSError / ValueError: If a configured palette file is unreadable
        """
        if not config.palette_file:
            return DEFAULT_PALETTE
        return load_palette(config.palette_file)
