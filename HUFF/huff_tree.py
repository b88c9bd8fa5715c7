from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from freqs import SENTINEL
from huff_errors import CapacityError

Symbol = int  # byte value 0..255, or SENTINEL

MAX_CODE_LEN = 32  # fits the 1-byte length field; two 16-bit words per code

@dataclass
class _Node:
    freq: int
    sym: Optional[Symbol] = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

def build_tree(freqs: Dict[Symbol, int]) -> _Node:
    """
    Greedy merge of the two lightest nodes until one root is left.

    Heap entries are (freq, order, node). Leaves use order=symbol and merged
    nodes use order=SENTINEL+1+k (k = merge index), so equal weights pop
    leaves first by ascending symbol, then merged nodes oldest first.
    The first node popped becomes the left ("0") child.
    """
    if not freqs:
        raise ValueError("cannot build a tree from an empty frequency table")
    pq: List[Tuple[int, int, _Node]] = [
        (f, s, _Node(freq=f, sym=s)) for s, f in sorted(freqs.items())
    ]
    heapq.heapify(pq)
    order = SENTINEL + 1
    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, order, _Node(freq=fa + fb, left=a, right=b)))
        order += 1
    return pq[0][2]

def assign_codes(root: _Node, max_len: int = MAX_CODE_LEN) -> Dict[Symbol, str]:
    """
    Return mapping: sym -> bit string ("0" left, "1" right) for every leaf.
    A lone leaf gets "0". Raises CapacityError if any code is longer than max_len.
    """
    if not 1 <= max_len <= MAX_CODE_LEN:
        raise ValueError(f"max_len must be in 1..{MAX_CODE_LEN}, got {max_len}")
    if root.is_leaf:
        return {root.sym: "0"}

    codes: Dict[Symbol, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.sym] = prefix
            continue
        if len(prefix) + 1 > max_len:
            raise CapacityError(
                f"code length {len(prefix) + 1} exceeds maximum of {max_len} bits"
            )
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return codes

def build_codes(freqs: Dict[Symbol, int], max_len: int = MAX_CODE_LEN) -> Dict[Symbol, str]:
    # the tree is dropped as soon as the codes are read off
    return assign_codes(build_tree(freqs), max_len)

def is_prefix_free(codes: Dict[Symbol, str]) -> bool:
    # in sorted order a prefix always sits right before one of its extensions
    ordered = sorted(codes.values())
    for a, b in zip(ordered, ordered[1:]):
        if b.startswith(a):
            return False
    return True
