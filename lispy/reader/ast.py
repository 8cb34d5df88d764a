from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AstNode:
    """A node of the parse tree handed from the reader to the evaluator.

    `tag` names the grammar rule that produced the node ("expr|number",
    "expr|sexpr", ">" for the root, ...); `contents` is the raw text of a
    leaf and empty for list nodes.
    """

    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 0
    column: int = 0

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child(self, i: int) -> AstNode:
        return self.children[i]

    # Debugging aid only; the evaluator never calls it
    def pretty(self, indent: int = 0) -> str:
        """Indented tree dump, one node per line."""
        pad = "  " * indent
        head = f"{pad}{self.tag}: '{self.contents}'" if self.contents else f"{pad}{self.tag}"
        lines = [head]
        lines.extend(c.pretty(indent + 1) for c in self.children)
        return "\n".join(lines)
