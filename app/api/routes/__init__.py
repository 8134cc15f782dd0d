"""REST resource routers."""
