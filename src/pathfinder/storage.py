"""
Persistence of links as an append-only text file.

Each link is one UTF-8 line::

    <fromId>,<toId>,<true|false>

Ids are node identities (``Node.gen_id``), so loading needs the node list the
links should be resolved against. The text format is independent of where the
text lives: LinkStore formats and parses lines, and a LinkStorage reads and
appends raw text.
"""

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .constants import LINK_PATH, MIN_LINE_LENGTH
from .link import NodeLink
from .node import Node

logger = logging.getLogger(__name__)


class LinkError(Exception):
    """Base class for edge-file line errors."""

    pass


class LinkFormatError(LinkError):
    """Raised when an edge-file line does not have the expected fields."""

    pass


class LinkLookupError(LinkError):
    """Raised when an edge-file line names a node that is not in the list."""

    pass


class LinkStorage(ABC):
    """Medium that edge-file text is appended to and read from."""

    @abstractmethod
    def append(self, text: str) -> None:
        """Append ``text`` without touching existing content."""

    @abstractmethod
    def read(self) -> str:
        """Return the full stored text."""


class FileStorage(LinkStorage):
    """
    Edge file on disk.

    The file is created on first append. Reading a file that does not exist
    raises FileNotFoundError, like any other open failure.
    """

    def __init__(self, path: Union[str, Path] = LINK_PATH):
        self.path = Path(path)

    def append(self, text: str) -> None:
        with self.path.open("a", encoding="utf-8", newline="") as f:
            f.write(text)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")


class MemoryStorage(LinkStorage):
    """Edge file kept in memory."""

    def __init__(self, text: str = ""):
        self._buffer = io.StringIO()
        self._buffer.write(text)

    def append(self, text: str) -> None:
        self._buffer.write(text)

    def read(self) -> str:
        return self._buffer.getvalue()


def _index_by_id(nodes: Sequence[Node]) -> Dict[str, int]:
    # First occurrence wins for duplicate names.
    index: Dict[str, int] = {}
    for i, node in enumerate(nodes):
        index.setdefault(node.gen_id(), i)
    return index


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise LinkFormatError(f"Expected 'true' or 'false', got {value!r}")


def _parse_with_index(line: str, index: Dict[str, int]) -> NodeLink:
    parts = line.strip().split(",")
    if len(parts) != 3:
        raise LinkFormatError(f"Expected 3 comma separated fields: {line!r}")

    from_id, to_id, omni = (part.strip() for part in parts)
    omnidirectional = _parse_bool(omni)

    if from_id not in index:
        raise LinkLookupError(f"Node {from_id} does not exist in node list")
    if to_id not in index:
        raise LinkLookupError(f"Node {to_id} does not exist in node list")

    return NodeLink(index[from_id], index[to_id], omnidirectional)


def parse_link(line: str, nodes: Sequence[Node]) -> NodeLink:
    """
    Parse one edge-file line against ``nodes``.

    Args:
        line: Line in ``fromId,toId,bool`` form.
        nodes: Node list the ids are resolved in.

    Returns:
        A NodeLink indexing into ``nodes``.

    Raises:
        LinkFormatError: If the line is malformed.
        LinkLookupError: If either id is not found.
    """
    return _parse_with_index(line, _index_by_id(nodes))


class LinkStore:
    """
    Saves and loads links in the edge-file format.

    Example:
        >>> store = LinkStore(FileStorage("links.txt"))
        >>> for link in generate_links(nodes):
        ...     store.save(link, nodes)
        >>> links = store.load(nodes)
    """

    def __init__(
        self,
        storage: Optional[LinkStorage] = None,
        min_line_length: int = MIN_LINE_LENGTH,
    ):
        """
        Args:
            storage: Where text is kept. Defaults to a FileStorage at LINK_PATH.
            min_line_length: Lines this long or shorter are skipped on load.
        """
        self.storage = storage if storage is not None else FileStorage()
        self.min_line_length = min_line_length

    def save(self, link: NodeLink, nodes: Sequence[Node]) -> None:
        """Append one link."""
        self.storage.append(link.to_line(nodes))

    def save_all(self, links: Iterable[NodeLink], nodes: Sequence[Node]) -> None:
        """Append several links with a single write."""
        text = "".join(link.to_line(nodes) for link in links)
        if text:
            self.storage.append(text)
        logger.debug("Saved %d links", text.count("\n"))

    def load(self, nodes: Sequence[Node], skip_invalid: bool = False) -> List[NodeLink]:
        """
        Read every stored link and resolve it against ``nodes``.

        Args:
            nodes: Node list to resolve ids in.
            skip_invalid: Log and skip lines that fail to parse instead of
                raising.

        Returns:
            Links in file order.

        Raises:
            LinkError: On the first bad line, unless ``skip_invalid`` is set.
            OSError: If the storage cannot be read.
        """
        index = _index_by_id(nodes)
        links = []
        for line_num, line in enumerate(self.storage.read().split("\n"), 1):
            if len(line) <= self.min_line_length:
                continue
            try:
                links.append(_parse_with_index(line, index))
            except LinkError as e:
                if not skip_invalid:
                    raise type(e)(f"Line {line_num}: {e}") from e
                logger.warning("Skipping line %d: %s", line_num, e)

        logger.debug("Loaded %d links", len(links))
        return links
