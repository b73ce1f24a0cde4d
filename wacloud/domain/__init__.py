"""
wacloud domain layer.

Builders that compose outbound messages before they reach the client.
"""

from .builders import TemplateBuilder, clean_text

__all__ = ["TemplateBuilder", "clean_text"]
