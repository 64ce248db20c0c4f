"""
MockMaster CLI

Command-line interface for managing and replaying mock scenarios.

Commands:
    generate    - Generate a scenario from an OpenAPI spec
    list        - List stored scenarios
    show        - Show the recordings of a scenario
    delete      - Delete a scenario
    replay      - Resolve one request against a stored scenario

Examples:
    # Generate mocks from an OpenAPI spec
    mockmaster generate openapi.yaml --name petstore

    # Check which recording answers a request
    mockmaster replay petstore GET /pets/42
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional

from ..common.errors import MockMasterError
from ..common.logging_utils import LOG_LEVELS, setup_logging
from ..data.fakes import FakeData
from ..openapi.parser import load_spec
from ..replay.replay import IncomingRequest, create_replay_handler, find_replay_recording
from .config import MockMasterConfig, load_config
from .fs import delete_scenario, list_scenarios, read_scenario, write_scenario
from .generate import generate_scenarios_from_spec

logger = logging.getLogger(__name__)


def _format_timestamp(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime('%Y-%m-%d %H:%M:%S')


def _scenarios_dir(args, config: MockMasterConfig) -> str:
    return getattr(args, 'dir', None) or config.scenarios_dir


def cmd_generate(args, config: MockMasterConfig) -> int:
    """
    Generate scenarios from OpenAPI specs.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration

    Returns:
        Exit code
    """
    spec_paths = [args.spec] if args.spec else list(config.specs)
    if not spec_paths:
        print("❌ No OpenAPI spec given (pass a path or set 'specs' in the config file)")
        return 1

    output_dir = args.output or config.scenarios_dir
    fake = FakeData(seed=args.seed) if args.seed is not None else None

    print(f"📝 MockMaster Scenario Generation")
    print(f"   Output: {output_dir}")

    for number, spec_path in enumerate(spec_paths, 1):
        spec = load_spec(spec_path)
        name = args.name or spec.get('info', {}).get('title') or 'generated'
        if args.name and len(spec_paths) > 1:
            name = f"{args.name}-{number}"

        for scenario in generate_scenarios_from_spec(spec, name, fake=fake, base_url=config.base_url):
            file_path = write_scenario(output_dir, scenario)
            print(f"✅ {scenario.name}: {len(scenario.recordings)} recordings -> {file_path}")

    return 0


def cmd_list(args, config: MockMasterConfig) -> int:
    """List stored scenarios."""
    scenarios_dir = _scenarios_dir(args, config)
    scenarios = list_scenarios(scenarios_dir)

    if not scenarios:
        print(f"No scenarios found in {scenarios_dir}")
        return 0

    print(f"📂 {len(scenarios)} scenario(s) in {scenarios_dir}\n")
    for meta in scenarios:
        print(f"  • {meta.name} ({meta.recordings_count} recordings)")
        if args.verbose:
            if meta.description:
                print(f"    Description: {meta.description}")
            print(f"    Created: {_format_timestamp(meta.created_at)}")
            print(f"    Updated: {_format_timestamp(meta.updated_at)}")
            print(f"    File: {meta.file_path}")

    return 0


def cmd_show(args, config: MockMasterConfig) -> int:
    """Show the recordings of a scenario."""
    scenario = read_scenario(_scenarios_dir(args, config), args.name)
    if scenario is None:
        print(f"❌ Scenario not found: {args.name}")
        return 1

    print(f"🎭 {scenario.name}")
    if scenario.description:
        print(f"   {scenario.description}")
    print()

    for index, recording in enumerate(scenario.recordings):
        print(f"  [{index}] {recording.request.method} {recording.request.path} -> {recording.response.status}")

    return 0


def cmd_delete(args, config: MockMasterConfig) -> int:
    """Delete a scenario."""
    if delete_scenario(_scenarios_dir(args, config), args.name):
        print(f"🗑️  Deleted scenario: {args.name}")
        return 0

    print(f"❌ Scenario not found: {args.name}")
    return 1


def cmd_replay(args, config: MockMasterConfig) -> int:
    """Resolve one request against a stored scenario and print the response."""
    scenario = read_scenario(_scenarios_dir(args, config), args.name)
    if scenario is None:
        print(f"❌ Scenario not found: {args.name}")
        return 1

    request = IncomingRequest(method=args.method, path=args.path)
    response = create_replay_handler(scenario)(request)

    if response is None:
        print(f"✗ No recording matches {args.method} {args.path}")
        return 1

    if args.verbose:
        recording = find_replay_recording(scenario, request)
        print(f"✓ Matched recording {recording.id} ({recording.request.method} {recording.request.path})",
              file=sys.stderr)

    print(json.dumps(response.to_dict(), indent=2, default=str))
    return 0


COMMANDS = {
    'generate': cmd_generate,
    'list': cmd_list,
    'show': cmd_show,
    'delete': cmd_delete,
    'replay': cmd_replay,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='mockmaster',
        description="MockMaster - Record, generate and replay deterministic API mocks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate a scenario from an OpenAPI spec
  %(prog)s generate openapi.yaml --name petstore --output scenarios

  # List scenarios with details
  %(prog)s list --verbose

  # Resolve a request against a scenario
  %(prog)s replay petstore GET /pets/42
        """
    )
    parser.add_argument('-c', '--config', help='Config file (default: mockmaster.yaml/.yml/.json if present)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Log level (default: warning)')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # --- GENERATE command ---
    generate_parser = subparsers.add_parser('generate', help='Generate a scenario from an OpenAPI spec')
    generate_parser.add_argument('spec', nargs='?', help='OpenAPI spec file (YAML or JSON); defaults to config specs')
    generate_parser.add_argument('-n', '--name', help='Scenario name (default: spec title)')
    generate_parser.add_argument('-o', '--output', help='Output directory (default: config scenariosDir)')
    generate_parser.add_argument('--seed', type=int, help='Seed for reproducible generated data')

    # --- LIST command ---
    list_parser = subparsers.add_parser('list', help='List scenarios')
    list_parser.add_argument('-d', '--dir', help='Scenarios directory')
    list_parser.add_argument('--verbose', action='store_true', help='Show details')

    # --- SHOW command ---
    show_parser = subparsers.add_parser('show', help='Show the recordings of a scenario')
    show_parser.add_argument('name', help='Scenario name')
    show_parser.add_argument('-d', '--dir', help='Scenarios directory')

    # --- DELETE command ---
    delete_parser = subparsers.add_parser('delete', help='Delete a scenario')
    delete_parser.add_argument('name', help='Scenario name')
    delete_parser.add_argument('-d', '--dir', help='Scenarios directory')

    # --- REPLAY command ---
    replay_parser = subparsers.add_parser('replay', help='Resolve one request against a scenario')
    replay_parser.add_argument('name', help='Scenario name')
    replay_parser.add_argument('method', help='HTTP method')
    replay_parser.add_argument('path', help='Request path (e.g. /users/42)')
    replay_parser.add_argument('-d', '--dir', help='Scenarios directory')
    replay_parser.add_argument('--verbose', action='store_true', help='Show which recording matched')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except MockMasterError as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    setup_logging(args.log_level or config.log_level)
    logger.debug(f"Running '{args.command}' with config {config.to_dict()}")

    try:
        return COMMANDS[args.command](args, config)
    except (MockMasterError, OSError) as e:
        print(f"❌ {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
