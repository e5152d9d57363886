"""
Route List Command
Display named routes as 'name: pattern' lines, or every route as a table
"""
import json
from typing import Dict, List

from sovest.console.command import Command

# Column -> maximum width before truncation
TABLE_COLUMNS = {
    'Method': 20,
    'URI': 50,
    'Name': 30,
    'Action': 40,
    'Middleware': 30,
}


class RouteListCommand(Command):
    """List all named routes"""

    name = "route:list"
    description = "List all named routes in registration order"
    signature = "route:list [--json] [--aliases] [--verbose]"

    async def handle(self, *args, **kwargs):
        generator = self.url_generator()
        named_routes = generator.get_named_routes()

        if not named_routes:
            self.error("No named routes registered")
            return 1

        verbose = self.flag(kwargs.get('verbose')) or self.flag(kwargs.get('v'))

        if self.flag(kwargs.get('json')):
            payload = generator.routes.to_dict() if verbose else named_routes
            self.line(json.dumps(payload, indent=2))
            return 0

        if verbose:
            table = generator.routes.to_dict()
            self._print_table(self._rows(table['routes']))
            self.line()
            self.success(f"Showing {table['total']} routes ({table['named_routes']} named)")
            return 0

        self.line(generator.format_named_routes())

        if self.flag(kwargs.get('aliases')):
            self.line()
            self.info("Legacy aliases:")
            for alias, pattern in generator.routes.get_legacy_aliases().items():
                self.line(f"  {alias}: {pattern}")

        self.line()
        self.success(f"Showing {len(named_routes)} named routes")
        return 0

    @staticmethod
    def _rows(routes: List[Dict]) -> List[Dict[str, str]]:
        return [
            {
                'Method': '|'.join(route['methods']),
                'URI': route['pattern'],
                'Name': route['name'] or '-',
                'Action': route['action'],
                'Middleware': ', '.join(route['middleware']) or '-',
            }
            for route in routes
        ]

    def _print_table(self, rows: List[Dict[str, str]]):
        widths = {
            column: min(max([len(column)] + [len(row[column]) for row in rows]), limit)
            for column, limit in TABLE_COLUMNS.items()
        }
        separator = '+' + '+'.join('-' * (width + 2) for width in widths.values()) + '+'

        def render(values: Dict[str, str]) -> str:
            cells = (self._truncate(values[column], width).ljust(width) for column, width in widths.items())
            return '| ' + ' | '.join(cells) + ' |'

        self.line(separator)
        self.line(render({column: column for column in widths}))
        self.line(separator)
        for row in rows:
            self.line(render(row))
        self.line(separator)

    @staticmethod
    def _truncate(text: str, max_len: int) -> str:
        """Truncate text to max length with ellipsis"""
        if len(text) <= max_len:
            return text
        return text[:max_len - 3] + '...'
