"""Line-by-line mapping of Markdown-like CV text to display blocks."""

from dataclasses import dataclass
from enum import Enum


class BlockKind(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    LIST_ITEM = "list_item"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    kind: BlockKind
    text: str = ""


_PREFIXES: tuple[tuple[str, BlockKind], ...] = (
    ("# ", BlockKind.HEADING1),
    ("## ", BlockKind.HEADING2),
    ("- ", BlockKind.LIST_ITEM),
)
_PREFIX_BY_KIND = {kind: prefix for prefix, kind in _PREFIXES}


def to_blocks(text: str) -> list[Block]:
    """Map every line of *text* to exactly one block, in order.

    No lookahead and no merging: adjacent paragraph lines stay separate blocks.
    """
    return [_classify(line) for line in text.split("\n")]


def join_blocks(blocks: list[Block]) -> str:
    """Serialize blocks back to text; ``to_blocks`` of the result is *blocks*."""
    return "\n".join(_serialize(block) for block in blocks)


def _classify(line: str) -> Block:
    if not line:
        return Block(BlockKind.BLANK)
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return Block(kind, line[len(prefix):])
    return Block(BlockKind.PARAGRAPH, line)


def _serialize(block: Block) -> str:
    if block.kind is BlockKind.BLANK:
        return ""
    return _PREFIX_BY_KIND.get(block.kind, "") + block.text
