"""
FastAPI Dependencies
Resolve the per-request gateways from the shared collaborator handles.
"""
from typing import Any

from fastapi import Depends, Request

from portfolio.services.container import Services
from portfolio.services.gateways import ChatGateway, ContactGateway


def get_services(request: Request) -> Services:
    """Collaborators opened at startup and stored on the application."""
    return request.app.state.services


def get_contact_gateway(services: Services = Depends(get_services)) -> ContactGateway:
    return ContactGateway(
        store=services.store,
        transport=services.transport,
        renderer=services.renderer,
    )


def get_chat_gateway(services: Services = Depends(get_services)) -> ChatGateway:
    return ChatGateway(generator=services.generator)


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body, or None when the body is missing or malformed."""
    try:
        return await request.json()
    except ValueError:
        return None
