"""
API Schemas - Pydantic models for request/response validation

These schemas define the contract between the API and clients.
Missions themselves stay free-form JSON objects.
"""
