"""Parsing modules for HTML content."""

from .html_parser import PageParser, assemble_comment, assemble_header, assemble_post
from .tree import build_tree

__all__ = ['PageParser', 'assemble_comment', 'assemble_header', 'assemble_post', 'build_tree']
