"""Builders for composing outbound messages."""

from .template_builder import TemplateBuilder, clean_text

__all__ = ["TemplateBuilder", "clean_text"]
