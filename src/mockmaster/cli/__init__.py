"""
MockMaster CLI Module

Scenario storage, OpenAPI-driven scenario generation, configuration and
the `mockmaster` command.
"""

from .config import MockMasterConfig, load_config, find_config_file
from .fs import (
    ScenarioMetadata,
    ensure_scenario_dir,
    scenario_path,
    write_scenario,
    read_scenario,
    list_scenarios,
    delete_scenario,
)
from .generate import convert_path_format, generate_scenarios_from_spec

__all__ = [
    # Config
    'MockMasterConfig',
    'load_config',
    'find_config_file',

    # Storage
    'ScenarioMetadata',
    'ensure_scenario_dir',
    'scenario_path',
    'write_scenario',
    'read_scenario',
    'list_scenarios',
    'delete_scenario',

    # Generation
    'convert_path_format',
    'generate_scenarios_from_spec',
]
