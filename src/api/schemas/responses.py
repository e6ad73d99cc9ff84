"""
Pydantic schemas — Response models para a API.
"""

from pydantic import BaseModel


class ScopeResponse(BaseModel):
    type: str
    fields_type: str
    documents: list[str]
    selfie_required: bool
    title: str
    subtitle: str
    ready: str
    is_ready: bool


class ScopesResponse(BaseModel):
    scopes: list[ScopeResponse]
    warnings: list[str] = []


class HealthResponse(BaseModel):
    status: str
    version: str
    env: str
