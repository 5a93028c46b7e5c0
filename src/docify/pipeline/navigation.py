# topmark:header:start
#
#   project      : Docify
#   file         : navigation.py
#   file_relpath : src/docify/pipeline/navigation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Navigation document model (the ``SUMMARY.md`` table of contents).

A navigation document is an ordered list of entries rendered as a nested
markdown list, where the indentation of each line is its depth repeated in a
fixed indent unit:

```markdown
# Summary

- contracts
  - token
    - [ERC20](contracts/token/ERC20.md)
  - [Vault](contracts/Vault.md)
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from docify.constants import NAVIGATION_HEADING


class EntryKind(str, Enum):
    """Kind of navigation entry."""

    GROUP = "group"
    LEAF = "leaf"


@dataclass(frozen=True)
class NavigationEntry:
    """One line of the navigation document.

    Attributes:
        kind (EntryKind): ``GROUP`` for a directory, ``LEAF`` for a documentable module.
        label (str): Display label (directory name, or module name without extension).
        depth (int): Nesting depth; the input root itself is at depth 0.
        link (str | None): Relative link to the rendered document (leaves only).
    """

    kind: EntryKind
    label: str
    depth: int
    link: str | None = None

    @classmethod
    def group(cls, label: str, depth: int) -> NavigationEntry:
        """Return a directory entry."""
        return cls(EntryKind.GROUP, label, depth)

    @classmethod
    def leaf(cls, label: str, depth: int, link: str) -> NavigationEntry:
        """Return a module entry linking to its rendered document."""
        return cls(EntryKind.LEAF, label, depth, link)

    def render(self, indent: str) -> str:
        """Render the entry as a single markdown list line (no terminator)."""
        prefix: str = indent * self.depth
        if self.kind is EntryKind.LEAF:
            return f"{prefix}- [{self.label}]({self.link})"
        return f"{prefix}- {self.label}"


@dataclass
class NavigationDocument:
    """Ordered navigation entries, accumulated in traversal order."""

    indent: str = "  "
    heading: str = NAVIGATION_HEADING
    entries: list[NavigationEntry] = field(default_factory=lambda: [])

    def append(self, entry: NavigationEntry) -> None:
        """Append an entry; order of calls is the rendered order."""
        self.entries.append(entry)

    @property
    def leaves(self) -> list[NavigationEntry]:
        """Return the module entries, in order."""
        return [e for e in self.entries if e.kind is EntryKind.LEAF]

    @property
    def groups(self) -> list[NavigationEntry]:
        """Return the directory entries, in order."""
        return [e for e in self.entries if e.kind is EntryKind.GROUP]

    def labels(self) -> list[str]:
        """Return every entry label, in order."""
        return [e.label for e in self.entries]

    def render(self) -> str:
        """Render the full document: heading, blank line, one line per entry."""
        lines: list[str] = [self.heading, ""]
        lines.extend(entry.render(self.indent) for entry in self.entries)
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self.entries)
