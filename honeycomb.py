"""
Honeycomb Lattice
Builds a hexagonal lattice of letters arranged in concentric rings and
derives its adjacency from ring/position arithmetic alone.

ARCHITECTURE:
1. Ring geometry (ring_size)
2. Core Classes (Cell, Lattice)
3. Lattice Builder + Adjacency Resolver (build_lattice)
4. Text decoding (parse_lattice, load_lattice)

Ring 0 is the single center cell. Ring r >= 1 holds 6r cells, numbered
0..6r-1 in one rotational direction. Every r-th position of ring r is a
"corner" touching one inner cell; the rest are "edge" cells touching two.
"""

import sys
from dataclasses import dataclass

import numpy as np

# ============================================================================
# CONFIGURATION
# ============================================================================

CENTER_RING = 0
SIDES = 6            # A hexagon has 6 sides, so ring r holds 6r cells


def ring_size(ring):
    """Number of cells in a ring: 1 for the center, 6r otherwise"""
    if ring < 0:
        raise ValueError(f"Ring index must be non-negative, got {ring}")
    if ring == CENTER_RING:
        return 1
    return SIDES * ring


# ============================================================================
# SECTION 1: CORE DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """A single lattice position holding one symbol"""
    symbol: str
    ring: int
    position: int

    @property
    def key(self):
        return (self.ring, self.position)


class Lattice:
    """
    Read-only honeycomb of cells with a precomputed adjacency structure.

    Cells are addressed by (ring, position). Adjacency is stored as ordered
    lists of neighbor keys, so iteration order is deterministic. Nothing
    outside build_lattice() mutates a Lattice once it is returned.
    """

    def __init__(self, rings):
        self.rings = tuple(tuple(ring) for ring in rings)
        self.num_rings = len(self.rings)
        self._adjacency = {
            cell.key: [] for ring in self.rings for cell in ring
        }

        # Flat index of the first cell of each ring (ring-then-position order)
        self._offsets = [0] * self.num_rings
        total = 0
        for ring in range(self.num_rings):
            self._offsets[ring] = total
            total += ring_size(ring)
        self._size = total

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"Lattice(rings={self.num_rings}, cells={self._size})"

    # ------------------------------------------------------------------------
    # LOOKUP
    # ------------------------------------------------------------------------

    def cell(self, ring, position):
        """Get the cell at (ring, position)"""
        return self.rings[ring][position]

    def cells(self):
        """Iterate all cells in ring-then-position order"""
        for ring in self.rings:
            yield from ring

    def neighbors(self, ring, position):
        """Get neighbor keys of a cell, in insertion order"""
        return list(self._adjacency[(ring, position)])

    def neighbor_cells(self, cell):
        for ring, position in self._adjacency[cell.key]:
            yield self.rings[ring][position]

    def index_of(self, ring, position):
        """Flat index of a cell, counting from the center outward"""
        if not 0 <= ring < self.num_rings:
            raise IndexError(f"Ring {ring} out of range (0..{self.num_rings - 1})")
        if not 0 <= position < ring_size(ring):
            raise IndexError(f"Position {position} out of range for ring {ring}")
        return self._offsets[ring] + position

    def symbols(self):
        """Set of symbols present anywhere in the lattice"""
        return {cell.symbol for cell in self.cells()}

    def edge_count(self):
        """Number of undirected edges (each appears twice in the matrix)"""
        return int(self.adjacency_matrix().sum()) // 2

    def adjacency_matrix(self):
        """
        Dense boolean adjacency matrix indexed by flat cell index

        Returns:
            np.ndarray of shape (len(lattice), len(lattice)), symmetric with
            an all-False diagonal
        """
        matrix = np.zeros((self._size, self._size), dtype=bool)
        for (ring, position), neighbor_keys in self._adjacency.items():
            i = self.index_of(ring, position)
            for other in neighbor_keys:
                matrix[i, self.index_of(*other)] = True
        return matrix

    # ------------------------------------------------------------------------
    # DISPLAY
    # ------------------------------------------------------------------------

    def print_lattice(self, file=None):
        """Print the lattice ring by ring (to stderr by default)"""
        file = file or sys.stderr
        print("\nLattice:", file=file)
        for ring in self.rings:
            print(f"  ring {ring[0].ring:>2}: {' '.join(c.symbol for c in ring)}", file=file)


# ============================================================================
# SECTION 2: LATTICE BUILDER + ADJACENCY RESOLVER
# ============================================================================

def _link(adjacency, a, b):
    """Record an undirected edge, skipping duplicates"""
    if b not in adjacency[a]:
        adjacency[a].append(b)
    if a not in adjacency[b]:
        adjacency[b].append(a)


def inner_positions(ring, position):
    """
    Positions in ring-1 that the cell at (ring, position) touches

    Corner cells (position divisible by ring) touch one inner cell; edge
    cells touch two: the base index and the one just before it.

    Args:
        ring: Ring index, must be >= 1
        position: Position within the ring

    Returns:
        List of one or two inner-ring positions

    Raises:
        RuntimeError: if the computed index falls outside ring-1, which
            only happens for a position outside ring
    """
    inner_size = ring_size(ring - 1)
    offset = position % ring
    side = (position - offset) // ring
    if offset == 0:
        inner = side * (ring - 1)
        if not 0 <= inner < inner_size:
            raise RuntimeError(
                f"Inner position {inner} out of range for ring {ring - 1} "
                f"(size {inner_size}) from cell {(ring, position)}"
            )
        return [inner]

    # Only the last edge of the last side reaches inner_size and wraps to 0
    base = side * (ring - 1) + offset
    if not 1 <= base <= inner_size:
        raise RuntimeError(
            f"Inner position {base} out of range for ring {ring - 1} "
            f"(size {inner_size}) from cell {(ring, position)}"
        )
    return [base % inner_size, base - 1]


def resolve_adjacency(lattice):
    """
    Install same-ring and inner-ring edges for every cell

    Each cell links forward to position+1 in its own ring; the backward
    link comes from the previous cell's forward step, closing each ring
    into a cycle. Inner links are computed from the outer side only.
    """
    adjacency = lattice._adjacency

    for ring in range(1, lattice.num_rings):
        size = ring_size(ring)

        for position in range(size):
            here = (ring, position)
            _link(adjacency, here, (ring, (position + 1) % size))

            for inner in inner_positions(ring, position):
                _link(adjacency, here, (ring - 1, inner))


def build_lattice(ring_symbols):
    """
    Build a fully linked lattice from per-ring symbols

    Args:
        ring_symbols: One sequence per ring; ring r must hold exactly
            ring_size(r) symbols (a string works, one character per cell)

    Returns:
        Lattice with adjacency resolved

    Raises:
        ValueError: if any ring has the wrong number of symbols
    """
    rings = []
    for ring, symbols in enumerate(ring_symbols):
        expected = ring_size(ring)
        if len(symbols) != expected:
            raise ValueError(
                f"Ring {ring} must have {expected} symbols, got {len(symbols)}"
            )
        rings.append([Cell(symbol, ring, position) for position, symbol in enumerate(symbols)])

    lattice = Lattice(rings)
    resolve_adjacency(lattice)
    return lattice


# ============================================================================
# SECTION 3: TEXT DECODING
# ============================================================================

def parse_lattice(text):
    """
    Decode the textual lattice description

    Format: the first token is the ring count N, followed by N lines, line i
    holding the ring_size(i) symbols of ring i with no separators.

    Empty or whitespace-only text is an empty lattice, same as "0".

    Raises:
        ValueError: on an invalid ring count, missing ring lines,
            or a ring line of the wrong length
    """
    stripped = text.lstrip()
    if not stripped:
        return build_lattice([])

    first_line, _, rest = stripped.partition("\n")
    tokens = first_line.split()
    try:
        num_rings = int(tokens[0])
    except ValueError:
        raise ValueError(f"Ring count must be an integer, got {tokens[0]!r}") from None
    if num_rings < 0:
        raise ValueError(f"Ring count must be non-negative, got {num_rings}")

    # Anything after the count on its own line counts as ring 0
    lines = []
    if len(tokens) > 1:
        lines.append(first_line.split(None, 1)[1])
    lines.extend(rest.splitlines())

    ring_lines = [line.rstrip() for line in lines[:num_rings]]
    if len(ring_lines) < num_rings:
        raise ValueError(f"Expected {num_rings} ring lines, got {len(ring_lines)}")

    return build_lattice(ring_lines)


def load_lattice(path):
    """Load and build a lattice from a text file"""
    with open(path, 'r') as f:
        return parse_lattice(f.read())
