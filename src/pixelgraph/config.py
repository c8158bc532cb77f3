"""
Configuration management for pixelgraph.

Loads YAML configuration over defaults for region operations, tracing and
output.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml


@dataclass
class RegionConfig:
    """Configuration for region operations."""
    traversal: str = "bfs"  # "bfs" or "dfs"
    fill_color: list = field(default_factory=lambda: [255, 0, 0])
    outline_color: list = field(default_factory=lambda: [0, 0, 0])


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class OutputConfig:
    """Configuration for pipeline outputs."""
    save_report: bool = True
    report_name: str = "region_report.json"


@dataclass
class PipelineConfig:
    """Complete configuration."""
    region: RegionConfig = field(default_factory=RegionConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


SECTIONS = ("region", "tracing", "output")


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values. Unknown keys are ignored.
    """
    config = PipelineConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass."""
    for section_name in SECTIONS:
        section_data = yaml_data.get(section_name) or {}
        section = getattr(config, section_name)
        for key, value in section_data.items():
            if hasattr(section, key):
                setattr(section, key, value)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = PipelineConfig()

    yaml_data = {name: asdict(getattr(config, name)) for name in SECTIONS}
    # file_path has no useful default
    del yaml_data["tracing"]["file_path"]

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
