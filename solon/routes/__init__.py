"""
FastAPI routers for all API endpoints.

Routes stay thin: validate the request, call the service layer, map errors
to HTTP responses.
"""
