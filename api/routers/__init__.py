"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- missions: List, create, update status and delete missions
- combinations: Fetch and merge used value combinations
- admin: Destructive maintenance (clear all data)
- health: Health checks and storage info
"""
