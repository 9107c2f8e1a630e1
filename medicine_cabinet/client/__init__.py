"""Client: session store, HTML rendering and typed actions against the API."""

from medicine_cabinet.client.api import ApiClientError, CabinetApiClient
from medicine_cabinet.client.controller import CabinetController
from medicine_cabinet.client.render import RenderedPage, render_page, type_bucket
from medicine_cabinet.client.state import SessionSnapshot, SessionStore, View

__all__ = [
    "ApiClientError",
    "CabinetApiClient",
    "CabinetController",
    "RenderedPage",
    "SessionSnapshot",
    "SessionStore",
    "View",
    "render_page",
    "type_bucket",
]
