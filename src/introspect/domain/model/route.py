"""Route descriptor."""

from dataclasses import dataclass

from introspect.domain.predicates.normalize import normalize_path

# Controller binding as registered on the route:
#   "App.UserController@index"      combined identifier
#   "App.InvokableController"       invokable, no member
#   ("App.UserController", "index") target/member pair
#   (UserController, "index")       class/member pair
#   ("App.InvokableController",)    target only, name or class
#   None                            closure route, no controller
type ControllerAction = str | tuple[str | type, ...] | None


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """Registered HTTP route.

    Attributes:
        uri: Declared path, with or without leading slash
        methods: HTTP methods (upper-case, e.g. ("GET", "HEAD"))
        name: Route name, None for unnamed routes
        middleware: Assigned middleware tokens, may carry parameters ("throttle:60,1")
        controller: Controller binding, see ControllerAction
    """

    uri: str
    methods: tuple[str, ...]
    name: str | None = None
    middleware: tuple[str, ...] = ()
    controller: ControllerAction = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.uri is None:
            raise TypeError("uri must not be None")
        if not isinstance(self.methods, tuple):
            raise TypeError(f"methods must be tuple, got {type(self.methods).__name__}")
        if not isinstance(self.middleware, tuple):
            raise TypeError(f"middleware must be tuple, got {type(self.middleware).__name__}")
        if isinstance(self.controller, tuple):
            if not self.controller:
                raise ValueError("controller tuple must not be empty")
            target, *member = self.controller
            if not isinstance(target, (str, type)):
                raise TypeError(
                    f"controller target must be class or class name, got {type(target).__name__}"
                )
            if member and not isinstance(member[0], (str, type(None))):
                raise TypeError(f"controller method must be str, got {type(member[0]).__name__}")

    @property
    def path(self) -> str:
        """Declared path with exactly one leading slash."""
        return normalize_path(self.uri)
