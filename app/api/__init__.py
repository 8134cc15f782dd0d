"""HTTP API for the Asset Catalog."""
