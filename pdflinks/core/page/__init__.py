"""
Page-level link access for PDF documents.
"""

from .link_layer import PageLinkLayer

__all__ = ["PageLinkLayer"]
