from typing import List, Literal, Sequence, Union

from pydantic import BaseModel, Field

NodeKind = Literal["span", "p", "strong", "em", "code", "u", "ul", "ol", "li"]


class RichNode(BaseModel):
    """A presentational node: a kind plus children, nothing else.

    Nodes never carry attributes, so a tree built from untrusted markup can
    only ever describe the fixed set of kinds in :data:`NodeKind`.
    """

    kind: NodeKind
    children: List[Union["RichNode", str]] = Field(default_factory=list)

    def text(self) -> str:
        return plain_text(self.children)


RichNode.model_rebuild()


def plain_text(nodes: Sequence[Union[RichNode, str]]) -> str:
    """Concatenate the text of *nodes* depth-first, dropping all formatting."""
    return "".join(node if isinstance(node, str) else node.text() for node in nodes)
