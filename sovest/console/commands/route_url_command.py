"""
Route URL Command
Generate the URL for a route name from the command line
"""
from sovest.console.command import Command
from sovest.exceptions import RoutingException


class RouteUrlCommand(Command):
    """Generate a URL for a named route"""

    name = "route:url"
    description = "Generate the URL for a named route or legacy alias"
    signature = "route:url <name> [--param=value ...] [--absolute]"

    async def handle(self, *args, **kwargs):
        if not args:
            self.error(f"Missing route name. Usage: {self.signature}")
            return 1

        absolute = self.flag(kwargs.pop('absolute', False))

        try:
            url = self.url_generator().url(args[0], kwargs, absolute=absolute)
        except RoutingException as e:
            self.error(e.message)
            return 1

        self.line(url)
        return 0
