#!python3 -X utf8

from typing import Any, List, Optional
import sys
import os
import argparse
import logging

##################################################################################################
# Main
##################################################################################################

ArgParser = argparse.ArgumentParser

class Commands:
    def __init__(self, parser: ArgParser) -> None:
        self.root_parser = parser
        self.parsers = {}
        self.subparsers = {}

    class Command:
        def __init__(self, commands: 'Commands', name: str) -> None:
            path = name.split('/')
            parsers = commands.parsers
            subparsers = commands.subparsers

            def subcommand(i: int) -> str:
                if i == 0: return 'command'
                return ('sub' * i) + 'command'

            if '' not in parsers:
                parsers[''] = commands.root_parser

            if '' not in subparsers:
                subparsers[''] = commands.root_parser.add_subparsers(dest='command')

            for i in range(1, len(path) + 1):
                p = '/'.join(path[:i])
                p0 = '/'.join(path[:i-1])
                if p not in parsers:
                    parsers[p] = subparsers[p0].add_parser(path[i-1])
                if p not in subparsers and i != len(path):
                    subparsers[p] = parsers[p].add_subparsers(dest=subcommand(i))

            self.parser = parsers[name]

        def __enter__(self) -> ArgParser:
            return self.parser

        def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
            pass

    def __call__(self, name: str) -> 'Commands.Command':
        return Commands.Command(self, name)


def build_parser() -> ArgParser:
    parser = argparse.ArgumentParser(description="Prepare the static assets of a gear before compilation")
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')
    commands = Commands(parser)

    with commands('prepare') as cmd:
        cmd.add_argument('env', type=str, nargs='?', help='Compile environment passed to the npm-script.')
        cmd.add_argument('--root', type=str, default='.', help='Gear directory containing package.json.')

    with commands('assets/list') as cmd:
        cmd.add_argument('--root', type=str, default='.')

    with commands('config/check') as cmd:
        cmd.add_argument('env', type=str, nargs='?')
        cmd.add_argument('--root', type=str, default='.')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    from gear_assets.config import load_config
    from gear_assets.errors import PrepareAssetsError
    from gear_assets.messages import error

    try:
        config = load_config(getattr(args, 'root', '.'), getattr(args, 'env', None))
    except ValueError as e:
        error(str(e))
        return 1

    try:
        match args.command:
            case 'prepare':
                from gear_assets.tasks.prepare import prepare_assets
                prepare_assets(config)

            case 'assets':
                match args.subcommand:
                    case 'list':
                        from gear_assets.assets import dump_asset_file_paths
                        dump_asset_file_paths(config.root)
                    case _:
                        parser.error(f"Unknown subcommand: {args.subcommand}")

            case 'config':
                match args.subcommand:
                    case 'check':
                        from gear_assets.tasks.check_config import check_config
                        check_config(config)
                    case _:
                        parser.error(f"Unknown subcommand: {args.subcommand}")

            case _:
                raise ValueError(f"Unknown command: {args.command}")

    except PrepareAssetsError as e:
        error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
