"""API routes for BindMaster"""

from web.backend.api import ai, cover, export_api

__all__ = ["ai", "cover", "export_api"]
