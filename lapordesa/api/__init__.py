"""HTTP layer: routers, dependencies and result mapping."""
