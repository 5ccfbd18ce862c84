"""Build order example for topsort.

This example plans the build of a small multi-package project:
- Edges point from a package to the packages it needs
- stable_top_sort gives the same plan on every run
- A dependency cycle is reported with the offending path
"""

import topsort as ts

graph: ts.Graph[str] = ts.Graph()

# app needs the web and cli frontends, which share the core library
graph.add_edge("app", "web")
graph.add_edge("app", "cli")
graph.add_edge("web", "core")
graph.add_edge("cli", "core")
graph.add_edge("core", "compat")

# Documentation is built on its own
graph.add_node("docs")

print("Build order:", " -> ".join(graph.stable_top_sort("app")))

# Introducing a back edge makes the plan impossible
graph.add_edge("compat", "web")
try:
    graph.stable_top_sort("app")
except ts.CycleError as e:
    print(f"Dependency cycle detected: {' -> '.join(e.cycle)}")
