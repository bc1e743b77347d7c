"""
API Services - Business logic between routers and repositories
"""
