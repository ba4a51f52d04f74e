"""Renderers for human-readable document output."""

from .console import render_documents

__all__ = ["render_documents"]
