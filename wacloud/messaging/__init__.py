"""
wacloud messaging components.

Usage:
    from wacloud.messaging import WhatsAppClient
    from wacloud.messaging.whatsapp.models import Template, APIResponse
"""

from .whatsapp.client import WhatsAppClient, WhatsAppUrlBuilder

__all__ = ["WhatsAppClient", "WhatsAppUrlBuilder"]
