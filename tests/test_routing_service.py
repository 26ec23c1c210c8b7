from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from pathfinder.adapters.cache import InMemoryCache, NullCache
from pathfinder.adapters.dijkstra_engine import DijkstraEngine
from pathfinder.config import AppConfig, CacheConfig, EngineConfig
from pathfinder.domain.errors import NoRouteFoundError
from pathfinder.domain.models import INFINITY, RouteResult
from pathfinder.graph.model import Graph
from pathfinder.services.routing import RoutingService


SAMPLE = {
    "A": {"B": 2, "C": 3},
    "B": {"C": 1, "D": 1},
    "C": {"D": 4},
    "D": {"C": 2},
}


class CountingEngine:
    """Engine stub that delegates to DijkstraEngine and counts runs."""

    def __init__(self):
        self.runs = []
        self._engine = DijkstraEngine(config=EngineConfig())

    def run(self, graph, source):
        self.runs.append(source)
        return self._engine.run(graph, source)


@pytest.fixture
def engine():
    return CountingEngine()


@pytest.fixture
def service(engine):
    return RoutingService(
        graph=Graph.from_mapping(SAMPLE),
        engine=engine,
        cache=InMemoryCache(name="test"),
    )


def test_route_returns_path_and_distance(service):
    route = service.route("A", "D")

    assert route == RouteResult(path=("A", "B", "D"), total_distance=3)
    assert route.num_stops == 3


def test_route_to_source(service):
    route = service.route("A", "A")

    assert route.path == ("A",)
    assert route.total_distance == 0


def test_route_to_unreachable_raises(service):
    with pytest.raises(NoRouteFoundError) as excinfo:
        service.route("D", "A")

    assert excinfo.value.source == "D"
    assert excinfo.value.target == "A"


def test_route_safe_returns_empty_result(service):
    route = service.route_safe("A", "F")

    assert route.is_empty
    assert route.total_distance == INFINITY


def test_tree_is_cached_per_source(service, engine):
    service.route("A", "D")
    service.route("A", "C")
    service.route("B", "D")

    assert engine.runs == ["A", "B"]


def test_add_edge_invalidates_cache(service, engine):
    assert service.route("A", "D").total_distance == 3

    service.add_edge("A", "D", 1)

    assert service.route("A", "D") == RouteResult(path=("A", "D"), total_distance=1)
    assert engine.runs == ["A", "A"]


def test_add_vertex_invalidates_cache(service, engine):
    service.tree_from("A")
    service.add_vertex("Z")

    assert service.distances_from("A")["Z"] == INFINITY
    assert engine.runs == ["A", "A"]


def test_distances_from_returns_a_copy(service):
    distances = service.distances_from("A")
    distances["A"] = 99

    assert service.distances_from("A")["A"] == 0


def test_describe_marks_unreachable_as_none():
    service = RoutingService(graph=Graph.from_mapping({"A": {"B": 1}, "B": {}, "C": {}}))

    assert service.describe("A") == {"A": 0, "B": 1, "C": None}


def test_format_result(service):
    assert service.format_result(service.route("A", "D")) == (
        "Shortest path: A -> B -> D\nTotal distance: 3"
    )
    assert service.format_result(RouteResult.empty()) == "No path found"


def test_create_uses_configured_cache():
    config = AppConfig(cache=CacheConfig(enabled=True, max_size=4))

    service = RoutingService.create(SAMPLE, config)

    assert isinstance(service.cache, InMemoryCache)
    assert service.cache.max_size == 4
    assert isinstance(service.engine, DijkstraEngine)
    assert isinstance(service.graph, Graph)


def test_create_with_cache_disabled():
    config = AppConfig(cache=CacheConfig(enabled=False))

    service = RoutingService.create(SAMPLE, config)

    assert isinstance(service.cache, NullCache)
    assert service.route("A", "D").path == ("A", "B", "D")


def test_create_passes_engine_config():
    config = AppConfig(engine=EngineConfig(skip_stale=True))

    service = RoutingService.create(Graph.from_mapping(SAMPLE), config)

    assert service.engine.config.skip_stale is True


def test_cached_tree_cannot_be_corrupted_by_callers(service):
    tree = service.tree_from("A")

    with pytest.raises(TypeError):
        tree.predecessors["D"] = None
    with pytest.raises(TypeError):
        tree.distances["D"] = 0

    assert service.route_safe("A", "D").path == ("A", "B", "D")
    assert service.tree_from("A").distance_to("D") == 3


def test_service_shared_between_querying_threads(engine):
    service = RoutingService(
        graph=Graph.from_mapping(SAMPLE),
        engine=engine,
        cache=InMemoryCache(name="threads"),
    )
    targets = ["A", "B", "C", "D"] * 25

    with ThreadPoolExecutor(max_workers=8) as pool:
        routes = list(pool.map(lambda t: service.route("A", t), targets))

    assert [r.total_distance for r in routes[:4]] == [0, 2, 3, 3]
    assert all(r == routes[i % 4] for i, r in enumerate(routes))
    assert service.cache.size() == 1
