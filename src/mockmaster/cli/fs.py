"""
MockMaster Scenario Store

Scenarios live in a directory as '<name>.json' files, one scenario per
file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass

from ..common.errors import ScenarioFormatError
from ..replay.persist import deserialize_scenario, serialize_scenario
from ..replay.types import Scenario

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ScenarioMetadata:
    """Summary of a stored scenario."""

    name: str
    recordings_count: int
    created_at: int
    updated_at: int
    file_path: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'name': self.name,
            'recordingsCount': self.recordings_count,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
            'filePath': self.file_path,
        }
        if self.description is not None:
            data['description'] = self.description
        return data


def ensure_scenario_dir(scenarios_dir: PathLike) -> Path:
    """Create the scenarios directory if needed."""
    directory = Path(scenarios_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def scenario_path(scenarios_dir: PathLike, scenario_name: str) -> Path:
    return Path(scenarios_dir) / f"{scenario_name}.json"


def write_scenario(scenarios_dir: PathLike, scenario: Scenario) -> Path:
    """
    Write a scenario to '<scenarios_dir>/<name>.json', replacing any
    existing file.

    Returns:
        Path of the written file
    """
    ensure_scenario_dir(scenarios_dir)
    file_path = scenario_path(scenarios_dir, scenario.name)

    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(serialize_scenario(scenario))

    logger.debug(f"Wrote scenario '{scenario.name}' ({len(scenario.recordings)} recordings) to {file_path}")
    return file_path


def _load_scenario_file(file_path: Path) -> Scenario:
    """Read and parse one scenario file, naming the file in any format error."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return deserialize_scenario(content)
    except UnicodeDecodeError as e:
        raise ScenarioFormatError(f"{file_path}: not valid UTF-8 text ({e})") from e
    except ScenarioFormatError as e:
        raise ScenarioFormatError(f"{file_path}: {e}") from e


def read_scenario(scenarios_dir: PathLike, scenario_name: str) -> Optional[Scenario]:
    """
    Read a scenario by name.

    Returns:
        The scenario, or None if no file exists for it

    Raises:
        ScenarioFormatError: If the file exists but is not a valid scenario
    """
    file_path = scenario_path(scenarios_dir, scenario_name)
    if not file_path.exists():
        return None

    return _load_scenario_file(file_path)


def list_scenarios(scenarios_dir: PathLike) -> List[ScenarioMetadata]:
    """
    Summarize every scenario in a directory, sorted by name.

    Files that are not valid scenarios are skipped with a warning.
    """
    directory = Path(scenarios_dir)
    if not directory.is_dir():
        return []

    metadata: List[ScenarioMetadata] = []
    for file_path in sorted(directory.glob('*.json')):
        try:
            scenario = _load_scenario_file(file_path)
        except ScenarioFormatError as e:
            logger.warning(f"Skipping invalid scenario file: {e}")
            continue

        metadata.append(ScenarioMetadata(
            name=scenario.name,
            description=scenario.description,
            recordings_count=len(scenario.recordings),
            created_at=scenario.created_at,
            updated_at=scenario.updated_at,
            file_path=str(file_path)
        ))

    return sorted(metadata, key=lambda m: m.name)


def delete_scenario(scenarios_dir: PathLike, scenario_name: str) -> bool:
    """
    Delete a stored scenario.

    Returns:
        True if a file was removed
    """
    file_path = scenario_path(scenarios_dir, scenario_name)
    if not file_path.exists():
        return False

    file_path.unlink()
    logger.debug(f"Deleted scenario '{scenario_name}' ({file_path})")
    return True
