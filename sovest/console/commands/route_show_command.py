"""
Route Show Command
Display everything recorded for one route
"""
from sovest.console.command import Command
from sovest.routing import Legacy, NotFound, classify


class RouteShowCommand(Command):
    """Show the details of a named route or legacy alias"""

    name = "route:show"
    description = "Show pattern, group, action, methods and middleware of a route"
    signature = "route:show <name>"

    async def handle(self, *args, **kwargs):
        if not args:
            self.error(f"Missing route name. Usage: {self.signature}")
            return 1

        name = args[0]
        resolution = classify(name, self.url_generator().routes)

        if isinstance(resolution, NotFound):
            self.error(f"Route [{name}] not defined")
            return 1

        route = resolution.route
        details = route.to_dict()

        if isinstance(resolution, Legacy):
            self.info(f"[{name}] is a legacy alias")

        self.line(f"Name:       {route.name or '-'}")
        self.line(f"Pattern:    {route.pattern}")
        self.line(f"Group:      {route.group or '-'}")
        self.line(f"Action:     {details['action']}")
        self.line(f"Methods:    {'|'.join(details['methods'])}")
        self.line(f"Middleware: {', '.join(details['middleware']) or '-'}")
        self.line(f"Parameters: {', '.join(route.parameter_names) if route.has_parameters() else '-'}")
        if route.get_legacy_name():
            self.line(f"Alias:      {route.get_legacy_name()}")
        return 0
