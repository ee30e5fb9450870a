"""
Portfolio API Routers
FastAPI router modules for the contact form, chatbot and health probes.
"""
from portfolio.api import chatbot, contact, health

__all__ = [
    "chatbot",
    "contact",
    "health",
]
