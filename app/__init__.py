"""
Asset Catalog API

A REST API for managing a catalog of image assets organized into
collections and labelled with tags.
"""

__version__ = "1.0.0"
