"""Typed client and command-line tool for the Webflow CMS API."""

__version__ = "0.1.0"
