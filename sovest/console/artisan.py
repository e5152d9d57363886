"""
Artisan
Command discovery and dispatch for the sovest CLI
"""
import asyncio
import importlib
import inspect
import pkgutil
import sys
import traceback
from typing import Dict, List, Tuple

from sovest.console.command import Command
from sovest.logging import getLogger

logger = getLogger(__name__)


class Artisan:
    # Packages scanned for Command subclasses
    COMMAND_PACKAGES = ['sovest.console.commands']

    def __init__(self):
        self.commands: Dict[str, Command] = {}
        self._discover_commands()

    def _discover_commands(self):
        """Auto-discover commands"""
        for package_name in self.COMMAND_PACKAGES:
            package = importlib.import_module(package_name)

            for module_info in pkgutil.iter_modules(package.__path__):
                module_name = f"{package_name}.{module_info.name}"
                try:
                    module = importlib.import_module(module_name)
                except ImportError as e:
                    logger.warning(f"Skipping command module {module_name}: {e}")
                    continue

                for _, obj in inspect.getmembers(module, inspect.isclass):
                    if issubclass(obj, Command) and obj is not Command and obj.name:
                        self.commands[obj.name] = obj()

    def show_help(self):
        """Show available commands"""
        print("SoVest console")
        print()

        if not self.commands:
            print("No commands available.")
            return

        categories: Dict[str, List[Command]] = {}
        for name, cmd in self.commands.items():
            category = name.split(':')[0] if ':' in name else 'general'
            categories.setdefault(category, []).append(cmd)

        for category in sorted(categories.keys()):
            print(f"{category.upper()}:")
            for cmd in sorted(categories[category], key=lambda c: c.name):
                print(f"  {cmd.signature:<45} {cmd.description}")
            print()

        print("Run 'sovest help <command>' for detailed information")

    async def run(self, argv: List[str]) -> int:
        """Run the CLI application"""
        if len(argv) < 2:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name in ['help', '--help', '-h']:
            if len(argv) > 2:
                cmd_name = argv[2]
                if cmd_name in self.commands:
                    cmd = self.commands[cmd_name]
                    print(f"\nCommand: {cmd.name}")
                    print(f"Description: {cmd.description}")
                    print(f"Signature: {cmd.signature}")
                    return 0
                print(f"Unknown command: {cmd_name}\n")
                self.show_help()
                return 1
            self.show_help()
            return 0

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        command = self.commands[command_name]
        args, kwargs = self._parse_args(argv[2:])

        try:
            exit_code = await command.handle(*args, **kwargs)
            return exit_code if exit_code is not None else 0
        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except Exception as e:
            print(f"\n❌ Error executing command: {e}\n")
            traceback.print_exc()
            return 1

    def _parse_args(self, argv: List[str]) -> Tuple[list, dict]:
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--json, --id=123)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    kwargs[key] = value
                else:
                    kwargs[arg[2:]] = True
            elif arg.startswith('-'):
                kwargs[arg[1:]] = True
            else:
                args.append(arg)

        return args, kwargs


def main() -> int:
    """Console script entry point"""
    return asyncio.run(Artisan().run(sys.argv))


if __name__ == '__main__':
    sys.exit(main())
