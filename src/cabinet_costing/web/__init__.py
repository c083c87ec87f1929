"""REST API for cabinet cost calculation."""

from cabinet_costing.web.app import create_app

__all__ = ["create_app"]
