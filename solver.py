"""
Honeycomb Word Solver
Decides which dictionary words can be traced through a honeycomb lattice

ARCHITECTURE:
1. Path Matcher (DFS with backtracking over the lattice adjacency)
2. Search Driver (tries every start cell matching the first letter)
3. Main Solver Class (HoneycombSolver: dictionary, results, statistics)
4. File I/O entry point (solve_from_files)

A word is found when its letters lie along a simple path: consecutive
letters on adjacent cells, no cell used twice.
"""

import sys

from honeycomb import load_lattice

# ============================================================================
# CONFIGURATION
# ============================================================================

TOP_LONGEST_WORDS = 10       # How many longest words to show in statistics

# ============================================================================
# SECTION 1: PATH MATCHER + SEARCH DRIVER
# ============================================================================

def matches(lattice, cell, word, index, visited):
    """
    Depth-first search for the rest of a word starting next to a cell

    Args:
        lattice: Lattice being searched
        cell: Cell that matched word[index - 1]
        word: Word being traced
        index: Position in word of the next letter to match
        visited: Set of (ring, position) keys on the current path

    Returns:
        True if word[index:] can be traced from a neighbor of cell
    """
    if index == len(word):
        return True

    visited.add(cell.key)
    try:
        for neighbor in lattice.neighbor_cells(cell):
            if (neighbor.symbol == word[index]
                    and neighbor.key not in visited
                    and matches(lattice, neighbor, word, index + 1, visited)):
                return True
        return False
    finally:
        # Backtrack
        visited.discard(cell.key)


def start_cells(word, lattice):
    """All cells whose symbol equals the word's first letter, in lattice order"""
    return [cell for cell in lattice.cells() if cell.symbol == word[0]]


def word_exists(word, lattice):
    """
    Check whether a word can be traced as a simple path in the lattice

    The empty word is trivially found. Each call owns its visited set, so
    one lattice can serve any number of searches, in any order.
    """
    if not word:
        return True

    for cell in start_cells(word, lattice):
        if matches(lattice, cell, word, 1, set()):
            return True
    return False


# ============================================================================
# SECTION 2: MAIN SOLVER CLASS
# ============================================================================

def load_dictionary(path):
    """
    Load dictionary words, one per line

    Surrounding whitespace is stripped and blank lines are skipped. Case
    and duplicates are kept as written.
    """
    words = []
    with open(path, 'r') as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return words


class HoneycombSolver:
    """Finds every dictionary word present in a honeycomb lattice"""

    def __init__(self, lattice, verbose=False, deduplicate=False):
        """
        Initialize solver

        Args:
            lattice: Fully built Lattice
            verbose: Print status lines to stderr
            deduplicate: Report repeated dictionary words only once
        """
        self.lattice = lattice
        self.verbose = verbose
        self.deduplicate = deduplicate
        self.words = []
        self.found_words = []
        self._symbols = lattice.symbols()

    def log(self, message):
        if self.verbose:
            print(message, file=sys.stderr)

    def load_dictionary(self, path):
        """Load dictionary words from a file"""
        self.words = load_dictionary(path)
        self.log(f"✓ Dictionary loaded: {len(self.words)} words")
        return self.words

    # ------------------------------------------------------------------------
    # WORD FINDING
    # ------------------------------------------------------------------------

    def contains(self, word):
        """Check one word, skipping the search when a letter is missing"""
        if any(ch not in self._symbols for ch in word):
            return False
        return word_exists(word, self.lattice)

    def find_words(self, words=None):
        """
        Find all dictionary words present in the lattice

        Args:
            words: Words to check (defaults to the loaded dictionary)

        Returns:
            Found words sorted ascending
        """
        if words is None:
            words = self.words
        if self.deduplicate:
            words = list(dict.fromkeys(words))

        found = [word for word in words if self.contains(word)]
        found.sort()
        self.found_words = found

        self.log(f"✓ Found {len(found)} of {len(words)} words")
        return found

    # ------------------------------------------------------------------------
    # DISPLAY
    # ------------------------------------------------------------------------

    def print_lattice_info(self):
        """Print lattice dimensions"""
        self.log("\nLattice Info:")
        self.log(f"  Rings: {self.lattice.num_rings}")
        self.log(f"  Cells: {len(self.lattice)}")
        self.log(f"  Edges: {self.lattice.edge_count()}")

    def print_word_statistics(self):
        """Print statistics about found words"""
        if not self.verbose:
            return

        self.log("\n" + "="*70)
        self.log("WORD STATISTICS")
        self.log("="*70)

        if not self.found_words:
            self.log("\n⚠️  No words found")
            return

        length_counts = {}
        for word in self.found_words:
            length_counts[len(word)] = length_counts.get(len(word), 0) + 1
        max_length = max(length_counts)

        self.log("\nWord count by length:")
        for length in sorted(length_counts):
            self.log(f"  {length} letters: {length_counts[length]} words")

        longest = [w for w in self.found_words if len(w) == max_length]
        self.log(f"\nLongest words ({max_length} letters): {', '.join(longest[:TOP_LONGEST_WORDS])}")


# ============================================================================
# SECTION 3: FILE I/O
# ============================================================================

def solve_from_files(lattice_path, dictionary_path, verbose=False, deduplicate=False):
    """
    Build the lattice, load the dictionary and find all present words

    Both files are read before any searching starts, so a missing or
    malformed input fails before results are produced.

    Returns:
        Sorted list of found words
    """
    lattice = load_lattice(lattice_path)
    solver = HoneycombSolver(lattice, verbose=verbose, deduplicate=deduplicate)
    solver.log(f"✓ Lattice loaded: {lattice_path}")
    solver.load_dictionary(dictionary_path)

    solver.print_lattice_info()
    if verbose:
        lattice.print_lattice()

    found = solver.find_words()
    solver.print_word_statistics()
    return found
