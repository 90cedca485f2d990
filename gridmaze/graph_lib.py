from typing import List, Optional, Set, Tuple


class OutOfRangeLabel(IndexError):
    pass


class Vertex:
    """Graph vertex; `edges` holds the adjacent Vertex objects."""

    def __init__(self, id: int):
        self.id = id
        self.edges: Set["Vertex"] = set()

    def __repr__(self):
        return f"Vertex({self.id})"


class Graph:
    """Undirected, unweighted simple graph over vertices labeled 0..n-1."""

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be >= 0, got {num_vertices}")
        self.vertices: List[Vertex] = [Vertex(i) for i in range(num_vertices)]

    @property
    def num_vertices(self):
        return len(self.vertices)

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __getitem__(self, id) -> Vertex:
        vertex = self.get_vertex(id)
        if vertex is None:
            raise OutOfRangeLabel(id)
        return vertex

    def get_vertex(self, id: int) -> Optional[Vertex]:
        if 0 <= id < len(self.vertices):
            return self.vertices[id]
        return None

    def add_edge(self, u: int, v: int) -> bool:
        """Connects vertices `u` and `v` in both directions.

        Self-loops and unknown labels are ignored; the return value tells
        whether the edge exists afterwards.
        """
        if u == v:
            return False
        vertex_u = self.get_vertex(u)
        vertex_v = self.get_vertex(v)
        if vertex_u is None or vertex_v is None:
            return False
        vertex_u.edges.add(vertex_v)
        vertex_v.edges.add(vertex_u)
        return True

    def edges(self) -> List[Tuple[int, int]]:
        return sorted(
            (u.id, v.id) for u in self.vertices for v in u.edges if u.id < v.id
        )

    def num_edges(self):
        return sum(len(v.edges) for v in self.vertices) // 2
