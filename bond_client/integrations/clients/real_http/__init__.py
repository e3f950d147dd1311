"""
Real HTTP integration clients.

These clients communicate with the bond calculation service over HTTP.

Important:
- Must return data as parsed JSON; typing into contracts happens in
  integrations/policy/*
- Must raise only the error kinds defined in integrations/clients/errors.py
"""

from .http_client import DEFAULT_HEADERS, ApiResponse, HttpClient
from .routes import BOND_CALCULATE

__all__ = ["DEFAULT_HEADERS", "ApiResponse", "HttpClient", "BOND_CALCULATE"]
