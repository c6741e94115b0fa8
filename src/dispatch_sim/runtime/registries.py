# runtime/registries.py
from collections.abc import Callable

from dispatch_sim.config.models import GraphBuiltin, GraphInline, GraphUnion
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.domain.network import build_builtin_graph, build_graph

GraphFactory = Callable[[GraphUnion], WeightedGraph]

_graph_registry: dict[str, GraphFactory] = {}


def register_graph_source(by: str):
    def deco(fn: GraphFactory):
        _graph_registry[by] = fn
        return fn

    return deco


def make_graph(cfg: GraphUnion) -> WeightedGraph:
    try:
        factory = _graph_registry[cfg.by]
    except KeyError:
        raise ValueError(f"Unknown graph source {cfg.by!r}") from None
    return factory(cfg)


@register_graph_source("builtin")
def _make_builtin(cfg: GraphBuiltin) -> WeightedGraph:
    return build_builtin_graph(cfg.name, duplicate_policy=cfg.duplicate_policy)


@register_graph_source("inline")
def _make_inline(cfg: GraphInline) -> WeightedGraph:
    return build_graph(
        [(n.id, n.lat, n.lng, n.name) for n in cfg.nodes],
        [(e.a, e.b, e.base_weight) for e in cfg.edges],
        duplicate_policy=cfg.duplicate_policy,
    )
