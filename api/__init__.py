"""
Turno Mission Store - HTTP API package

FastAPI application, routers, schemas, services and storage repositories.
"""
