# domain/errors.py


class RoutingError(Exception):
    """Base class for graph and path-finding errors."""


class InvalidWeight(RoutingError, ValueError):
    def __init__(self, weight, *, edge: tuple[str, str] | None = None):
        self.weight, self.edge = weight, edge
        where = f" on {edge[0]}->{edge[1]}" if edge else ""
        super().__init__(f"edge weight must be positive and finite, got {weight!r}{where}")


class InvalidEdge(RoutingError, ValueError):
    pass


class UnknownNode(RoutingError, KeyError):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self) -> str:
        return f"unknown node {self.node_id!r}"


class DuplicateNodeId(RoutingError, KeyError):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self) -> str:
        return f"node {self.node_id!r} already exists"


class DuplicateEdge(RoutingError, KeyError):
    def __init__(self, a, b):
        self.edge = (a, b)
        super().__init__(self.edge)

    def __str__(self) -> str:
        return f"edge {self.edge[0]}-{self.edge[1]} already exists"


class NoRouteFound(RoutingError, LookupError):
    """Expected outcome: the target is not reachable from the source."""

    def __init__(self, source, target, *, engine: str | None = None):
        self.source, self.target, self.engine = source, target, engine
        by = f" ({engine})" if engine else ""
        super().__init__(f"no route from {source!r} to {target!r}{by}")


class InconsistentSuccessorTable(RoutingError, AssertionError):
    """Path reconstruction hit a hole in a table that claims a finite distance."""

    def __init__(self, source, target, at):
        self.source, self.target, self.at = source, target, at
        super().__init__(
            f"successor table broken reconstructing {source!r}->{target!r} at {at!r}"
        )
