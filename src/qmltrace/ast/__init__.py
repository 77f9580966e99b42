from . import nodes
from .nodes import Kind, SyntaxNode, Token

__all__ = ["nodes", "Kind", "SyntaxNode", "Token"]
