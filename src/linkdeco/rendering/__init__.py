"""Presentation helpers shared by the reading view and the live preview."""

from .html import link_classes, pending_fragments, render_fragment, render_fragments

__all__ = ["link_classes", "pending_fragments", "render_fragment", "render_fragments"]
