"""HTTP interface: FastAPI routers and request/response translation."""
