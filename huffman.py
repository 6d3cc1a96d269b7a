import heapq
from dataclasses import dataclass
from itertools import count
from typing import Dict, Iterable, List, Optional

ALPHABET_SIZE = 256 # symbols are characters with code point 0..255


# Errors

class HuffmanError(ValueError):
    pass

class AlphabetOverflowError(HuffmanError):
    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"symbol {symbol!r} (code point {ord(symbol)}){where} "
            f"is outside the {ALPHABET_SIZE}-symbol alphabet"
        )

class SymbolNotCodedError(HuffmanError):
    def __init__(self, symbol: str, position: int, message: Optional[str] = None):
        self.symbol = symbol
        self.position = position
        super().__init__(message or f"symbol {symbol!r} at position {position} has no code in the code table")

class MalformedBitError(HuffmanError):
    def __init__(self, bit: str, position: int):
        self.bit = bit
        self.position = position
        super().__init__(f"invalid bit {bit!r} at position {position}, expected '0' or '1'")

class TruncatedCodeError(HuffmanError):
    def __init__(self, dangling_bits: int, message: Optional[str] = None):
        self.dangling_bits = dangling_bits
        super().__init__(message or f"bit string ends {dangling_bits} bit(s) into an unfinished code")


# Tree

@dataclass(frozen=True)
class HuffmanNode: # Node for Huffman tree
    symbol: Optional[str]   # character on leaves, None on internal nodes
    weight: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def __post_init__(self):
        if (self.left is None) != (self.right is None):
            raise ValueError("a Huffman node must have either zero or two children")
        if self.left is not None and self.weight != self.left.weight + self.right.weight:
            raise ValueError(
                f"internal node weight {self.weight} does not equal "
                f"{self.left.weight} + {self.right.weight}"
            )

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def leaves(self) -> List["HuffmanNode"]:
        """Leaves from left to right."""
        out = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                out.append(node)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return out


def _check_symbol(symbol: str, position: Optional[int] = None) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        where = f" at position {position}" if position is not None else ""
        raise HuffmanError(f"symbols must be single characters, got {symbol!r}{where}")
    if ord(symbol) >= ALPHABET_SIZE:
        raise AlphabetOverflowError(symbol, position)

def filler_symbol_for(symbol: str) -> str:
    # single-symbol inputs get a second leaf that never collides with the real one
    return '\x01' if symbol == '\0' else '\0'

def build_frequency_table(text: Iterable[str]) -> Dict[str, int]: # text: characters in the 256-symbol alphabet
    counts = [0] * ALPHABET_SIZE
    for position, symbol in enumerate(text):
        _check_symbol(symbol, position)
        counts[ord(symbol)] += 1
    return {chr(i): c for i, c in enumerate(counts) if c > 0}

def build_huffman_tree(frequency_table: Dict[str, int]) -> Optional[HuffmanNode]: # frequency_table: dict of symbol -> frequency
    for symbol, frequency in frequency_table.items():
        if not isinstance(frequency, int) or frequency <= 0:
            raise ValueError(f"frequency for {symbol!r} must be a positive integer, got {frequency!r}")
        _check_symbol(symbol)

    if not frequency_table:
        return None

    # (weight, insertion order, node): ties break by insertion order so output is reproducible
    order = count()
    priority_queue = [
        (frequency, next(order), HuffmanNode(symbol, frequency))
        for symbol, frequency in sorted(frequency_table.items())
    ]
    if len(priority_queue) == 1:
        only = priority_queue[0][2].symbol
        priority_queue.append((1, next(order), HuffmanNode(filler_symbol_for(only), 1)))
    heapq.heapify(priority_queue)

    # Build the tree
    while len(priority_queue) > 1:
        left_weight, _, left = heapq.heappop(priority_queue)
        right_weight, _, right = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(None, left_weight + right_weight, left, right) # internal node with combined weight
        heapq.heappush(priority_queue, (merged_node.weight, next(order), merged_node))

    return priority_queue[0][2] # root of the tree


# Code table

def build_code_table(root: Optional[HuffmanNode]) -> Dict[str, str]: # root: root of the Huffman tree
    """
    Map every leaf symbol to its path from the root, '0' for left and '1' for right.
    A root that is itself a leaf gets the empty path.
    """
    codes: Dict[str, str] = {}
    if root is None:
        return codes

    stack = [(root, '')]
    while stack:
        node, current_code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = current_code
            continue
        stack.append((node.right, current_code + '1'))
        stack.append((node.left, current_code + '0'))
    return codes


# Encode / decode

def encode(text: Iterable[str], code_map: Dict[str, str]) -> str: # code_map: dict of symbol -> Huffman code
    parts = []
    for position, symbol in enumerate(text):
        code = code_map.get(symbol)
        if code is None:
            raise SymbolNotCodedError(symbol, position)
        if not code:
            # empty codes only come from a single-leaf root
            raise SymbolNotCodedError(
                symbol, position, f"symbol {symbol!r} at position {position} has an empty code; "
                "a single-leaf tree cannot encode text unambiguously"
            )
        parts.append(code)
    return ''.join(parts)

def decode(bitstring: str, root: Optional[HuffmanNode]) -> str: # bitstring: the encoded string of '0's and '1's
    if not bitstring:
        return ''
    if root is None:
        raise TruncatedCodeError(len(bitstring), "cannot decode a non-empty bit string without a tree")
    if root.is_leaf:
        raise TruncatedCodeError(len(bitstring), "a single-leaf tree has no codes to decode bits against")

    decoded = []
    current_node = root
    depth = 0
    for position, bit in enumerate(bitstring):
        if bit == '0':
            current_node = current_node.left
        elif bit == '1':
            current_node = current_node.right
        else:
            raise MalformedBitError(bit, position)
        depth += 1
        if current_node.is_leaf: # reached a leaf
            decoded.append(current_node.symbol)
            current_node = root
            depth = 0

    if depth:
        raise TruncatedCodeError(depth)
    return ''.join(decoded)


@dataclass(frozen=True)
class EncodedResult:
    bits: str
    tree: Optional[HuffmanNode]

def compress(text: str) -> EncodedResult:
    frequency_table = build_frequency_table(text)
    root = build_huffman_tree(frequency_table)
    code_map = build_code_table(root)
    return EncodedResult(encode(text, code_map), root)

def decompress(result: EncodedResult) -> str:
    return decode(result.bits, result.tree)


# Reporting

def display_symbol(symbol: str) -> str:
    if symbol == '\n':
        return '\\n'
    if symbol == '\t':
        return '\\t'
    if symbol == '\r':
        return '\\r'
    if not symbol.isprintable():
        return f"\\x{ord(symbol):02x}"
    return symbol

def format_code_table(code_map: Dict[str, str]) -> List[str]:
    return [f"   {display_symbol(symbol)}: {code}" for symbol, code in sorted(code_map.items())]

def render_tree(root: Optional[HuffmanNode]) -> str:
    """
    Draw the tree sideways: right subtree above its parent, left subtree below.
    Internal nodes are labelled with '#'.
    """
    if root is None:
        return ''
    lines: List[str] = []

    def draw(node: HuffmanNode, prefix: str, is_tail: bool) -> None:
        if node.right is not None:
            draw(node.right, prefix + ("│   " if is_tail else "    "), False)
        label = '#' if node.symbol is None else display_symbol(node.symbol)
        lines.append(f"{prefix}{'└── ' if is_tail else '┌── '}<{label}: {node.weight}>")
        if node.left is not None:
            draw(node.left, prefix + ("    " if is_tail else "│   "), True)

    draw(root, '', True)
    return '\n'.join(lines) + '\n'
