"""Order build tasks and find the cheapest route through a weighted network.

Run with ``python examples/build_order.py``.
"""

import digraph as dg

tasks = (
    dg.Graph()
    .add_edge("fetch", "configure")
    .add_edge("configure", "compile")
    .add_edge("compile", "test")
    .add_edge("compile", "package")
    .add_edge("test", "release")
    .add_edge("package", "release")
)

print("Build order:", " -> ".join(dg.topological_sort(tasks)))
print("Needed after 'compile':", dg.topological_sort(tasks, ["compile"], include_source_nodes=False))

network = dg.Graph.from_serialized(
    {
        "nodes": [{"id": "tokyo"}, {"id": "osaka"}, {"id": "nagoya"}, {"id": "fukuoka"}],
        "links": [
            {"source": "tokyo", "target": "nagoya", "weight": 3},
            {"source": "tokyo", "target": "osaka", "weight": 8},
            {"source": "nagoya", "target": "osaka", "weight": 2},
            {"source": "osaka", "target": "fukuoka", "weight": 6},
        ],
    },
)

route = dg.dijkstra(network, "tokyo", "fukuoka")
print(f"Route: {' -> '.join(route.path)} ({route.distance})")

detour = dg.dijkstra(network, "tokyo", "fukuoka", lambda city: city != "nagoya")
print(f"Avoiding nagoya: {' -> '.join(detour.path)} ({detour.distance})")
