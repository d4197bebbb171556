"""REST API for SDK generation."""

from doc2code.web_server.components import ServerComponents, initialize_components
from doc2code.web_server.web_server import Doc2CodeWebServer

__all__ = ["Doc2CodeWebServer", "ServerComponents", "initialize_components"]
