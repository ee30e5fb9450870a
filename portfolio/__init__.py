"""
Portfolio Backend
Contact form and chatbot API for a personal portfolio site.
"""

__version__ = "1.0.0"
