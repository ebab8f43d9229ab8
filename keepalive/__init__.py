# Keep-alive functions
from .routes import register_keepalive_routes

__all__ = ["register_keepalive_routes"]
