from .edge import Edge, as_edge
from .edge_source import EdgeListSource, EdgeSource, fetch_edges
