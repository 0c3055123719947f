"""Question URL parsing domain service."""

import re

import logfire

from prep.domain.value import ParsedQuestion


TOPIC_ALIASES: dict[str, str] = {
    # Basic data structures
    "array": "Array",
    "string": "String",
    "linked-list": "Linked List",
    "stack": "Stack",
    "queue": "Queue",
    "hash-table": "Hash Table",
    "hash-map": "Hash Table",
    "hashtable": "Hash Table",
    "hashmap": "Hash Table",
    "set": "Hash Table",
    "matrix": "Matrix",
    "grid": "Matrix",
    "2d-array": "Matrix",
    # Trees
    "tree": "Binary Tree",
    "binary-tree": "Binary Tree",
    "binary-search-tree": "Binary Search Tree",
    "bst": "Binary Search Tree",
    "trie": "Trie",
    "prefix-tree": "Trie",
    "segment-tree": "Segment Tree",
    "binary-indexed-tree": "Binary Indexed Tree",
    "fenwick-tree": "Binary Indexed Tree",
    "n-ary-tree": "N-ary Tree",
    "red-black-tree": "Balanced Tree",
    "avl-tree": "Balanced Tree",
    # Advanced data structures
    "heap": "Heap",
    "priority-queue": "Heap",
    "min-heap": "Heap",
    "max-heap": "Heap",
    "union-find": "Union Find",
    "disjoint-set": "Union Find",
    "suffix-array": "Suffix Array",
    "suffix-tree": "Suffix Tree",
    "bloom-filter": "Bloom Filter",
    # Graphs
    "graph": "Graph",
    "directed-graph": "Graph",
    "undirected-graph": "Graph",
    "weighted-graph": "Graph",
    "adjacency-list": "Graph",
    "adjacency-matrix": "Graph",
    "topological-sort": "Topological Sort",
    "shortest-path": "Shortest Path",
    "minimum-spanning-tree": "Minimum Spanning Tree",
    "mst": "Minimum Spanning Tree",
    # Searching
    "binary-search": "Binary Search",
    "linear-search": "Linear Search",
    "depth-first-search": "Depth-First Search",
    "dfs": "Depth-First Search",
    "breadth-first-search": "Breadth-First Search",
    "bfs": "Breadth-First Search",
    "backtracking": "Backtracking",
    "brute-force": "Brute Force",
    # Sorting
    "sorting": "Sorting",
    "bubble-sort": "Bubble Sort",
    "selection-sort": "Selection Sort",
    "insertion-sort": "Insertion Sort",
    "merge-sort": "Merge Sort",
    "quick-sort": "Quick Sort",
    "heap-sort": "Heap Sort",
    "radix-sort": "Radix Sort",
    "counting-sort": "Counting Sort",
    "bucket-sort": "Bucket Sort",
    "topological-sorting": "Topological Sort",
    # Dynamic programming
    "dynamic-programming": "Dynamic Programming",
    "dp": "Dynamic Programming",
    "memoization": "Dynamic Programming",
    "tabulation": "Dynamic Programming",
    "kadane-algorithm": "Dynamic Programming",
    "knapsack": "Dynamic Programming",
    "longest-common-subsequence": "Dynamic Programming",
    "lcs": "Dynamic Programming",
    "longest-increasing-subsequence": "Dynamic Programming",
    "lis": "Dynamic Programming",
    "edit-distance": "Dynamic Programming",
    "fibonacci": "Dynamic Programming",
    # Greedy
    "greedy": "Greedy",
    "greedy-algorithm": "Greedy",
    "activity-selection": "Greedy",
    "huffman-coding": "Greedy",
    "fractional-knapsack": "Greedy",
    # Two pointers and sliding window
    "two-pointers": "Two Pointers",
    "sliding-window": "Sliding Window",
    "fast-slow-pointers": "Two Pointers",
    "tortoise-hare": "Two Pointers",
    "cycle-detection": "Cycle Detection",
    # Math
    "math": "Math",
    "mathematics": "Math",
    "number-theory": "Number Theory",
    "prime-numbers": "Prime Numbers",
    "sieve-of-eratosthenes": "Prime Numbers",
    "gcd-algorithm": "Math",
    "lcm-algorithm": "Math",
    "modular-arithmetic": "Modular Arithmetic",
    "combinatorics": "Combinatorics",
    "probability": "Probability",
    "geometry": "Geometry",
    "computational-geometry": "Geometry",
    # Bit manipulation
    "bit-manipulation": "Bit Manipulation",
    "bitwise": "Bit Manipulation",
    "bit-operations": "Bit Manipulation",
    "xor": "Bit Manipulation",
    "bit-masking": "Bit Manipulation",
    # Strings
    "string-matching": "String Matching",
    "pattern-matching": "String Matching",
    "kmp-algorithm": "String Matching",
    "rabin-karp": "String Matching",
    "z-algorithm": "String Matching",
    "manacher": "String Matching",
    "palindrome": "Palindrome",
    "anagram": "Anagram",
    "subsequence": "Subsequence",
    "substring": "Substring",
    # Recursion
    "recursion": "Recursion",
    "recursive": "Recursion",
    "divide-and-conquer": "Divide and Conquer",
    "tail-recursion": "Recursion",
    # Named algorithms
    "dijkstra": "Dijkstra Algorithm",
    "bellman-ford": "Bellman-Ford Algorithm",
    "floyd-warshall": "Floyd-Warshall Algorithm",
    "kruskal": "Kruskal Algorithm",
    "prim": "Prim Algorithm",
    "ford-fulkerson": "Max Flow",
    "max-flow": "Max Flow",
    "min-cut": "Min Cut",
    "bipartite-matching": "Bipartite Matching",
    # Design
    "design": "System Design",
    "system-design": "System Design",
    "object-oriented-design": "Object Oriented Design",
    "ood": "Object Oriented Design",
    "data-structure-design": "Data Structure Design",
    "iterator": "Iterator",
    "cache": "Cache",
    "lru": "LRU Cache",
    "lfu": "LFU Cache",
    # Game theory
    "game-theory": "Game Theory",
    "minimax": "Game Theory",
    "nim-game": "Game Theory",
    # Advanced topics
    "network-flow": "Network Flow",
    "linear-programming": "Linear Programming",
    "convex-hull": "Convex Hull",
    "line-sweep": "Line Sweep",
    "coordinate-compression": "Coordinate Compression",
    "mo-algorithm": "Mo Algorithm",
    "heavy-light-decomposition": "Heavy-Light Decomposition",
    "centroid-decomposition": "Centroid Decomposition",
    "sqrt-decomposition": "Square Root Decomposition",
    # Problem types
    "interval": "Interval",
    "intervals": "Interval",
    "range-query": "Range Query",
    "range-update": "Range Update",
    "simulation": "Simulation",
    "implementation": "Implementation",
    "ad-hoc": "Ad Hoc",
    "constructive-algorithms": "Constructive",
    "interactive": "Interactive",
    # Database
    "database": "Database",
    "sql": "SQL",
    # Concurrency
    "concurrency": "Concurrency",
    "multithreading": "Multithreading",
    "parallel-computing": "Parallel Computing",
    "locks": "Locks",
    "semaphore": "Semaphore",
    "deadlock": "Deadlock",
    # Memory
    "memory": "Memory",
    "garbage-collection": "Garbage Collection",
    "memory-allocation": "Memory Allocation",
    # Competitive programming
    "data-structures": "Data Structures",
    "binary-lifting": "Binary Lifting",
    "sparse-table": "Sparse Table",
    "persistent-data-structures": "Persistent Data Structures",
    "functional-programming": "Functional Programming",
    # Special categories
    "optimization": "Optimization",
    "approximation": "Approximation Algorithm",
    "randomized": "Randomized Algorithm",
    "online-algorithm": "Online Algorithm",
    "streaming": "Streaming Algorithm",
    "parallel-algorithm": "Parallel Algorithm",
    # Data structure variants
    "deque": "Deque",
    "double-ended-queue": "Deque",
    "circular-queue": "Circular Queue",
    "monotonic-stack": "Monotonic Stack",
    "monotonic-queue": "Monotonic Queue",
    "sparse-matrix": "Sparse Matrix",
    # Techniques
    "meet-in-the-middle": "Meet in the Middle",
    "discretization": "Discretization",
    "matrix-exponentiation": "Matrix Exponentiation",
    "inclusion-exclusion": "Inclusion-Exclusion Principle",
    "pigeonhole-principle": "Pigeonhole Principle",
    # Abbreviations
    "lca": "Lowest Common Ancestor",
    "rmq": "Range Minimum Query",
    "gcd": "Greatest Common Divisor",
    "lcm": "Least Common Multiple",
    "kmp": "KMP Algorithm",
    "fft": "Fast Fourier Transform",
    "ntt": "Number Theoretic Transform",
    "hld": "Heavy-Light Decomposition",
    "lct": "Link-Cut Tree",
    "pbds": "Policy Based Data Structures",
    "stl": "Standard Template Library",
}


def normalize_topic_key(topic: str) -> str:
    """Lowercase, hyphenate whitespace and underscores, drop punctuation."""
    key = re.sub(r"\s+", "-", topic.lower())
    key = key.replace("_", "-")
    return re.sub(r"[^\w-]", "", key)


def map_topics(topics: list[str]) -> list[str]:
    """Map provider topic names onto canonical topic names.

    Unknown topics are returned unchanged.

    Example:
        >>> map_topics(["hash_map", "Two Pointers", "Rolling Hash"])
        ['Hash Table', 'Two Pointers', 'Rolling Hash']
    """
    return [TOPIC_ALIASES.get(normalize_topic_key(topic), topic) for topic in topics]


class QuestionParser:
    """Extracts question metadata from a problem URL."""

    def supports(self, url: str) -> bool:
        """Whether this parser recognises the URL."""
        raise NotImplementedError

    async def parse_url(self, url: str) -> ParsedQuestion | None:
        """Parse a problem URL.

        Args:
            url: Problem URL

        Returns:
            Parsed metadata, or None when the URL is not a known problem

        Raises:
            ProviderError: If the upstream site cannot be queried
        """
        raise NotImplementedError


class QuestionParserService:
    """Domain service for parsing problem URLs."""

    def __init__(self, parser: QuestionParser) -> None:
        """Initialize question parser service.

        Args:
            parser: Site-specific URL parser
        """
        self.parser = parser

    async def parse_url(self, url: str) -> ParsedQuestion | None:
        """Parse a problem URL.

        Args:
            url: Problem URL

        Returns:
            Parsed metadata with canonical topics, or None for unknown URLs

        Raises:
            ProviderError: If the upstream site cannot be queried
        """
        with logfire.span("question_parser_service.parse_url", url=url):
            if not self.parser.supports(url):
                logfire.info("Unsupported question URL", url=url)
                return None

            parsed = await self.parser.parse_url(url)
            if parsed is None:
                logfire.info("Question not found at provider", url=url)
                return None

            logfire.info("Question parsed", url=url, title=parsed.title)
            return parsed.model_copy(update={"topics": map_topics(parsed.topics)})
