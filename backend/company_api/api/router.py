from fastapi import APIRouter

from company_api.api.routes import companies, users

api_router = APIRouter(prefix="/v1")
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])  # GET /{id}, POST /, PUT /, DELETE /{id}
api_router.include_router(users.router, tags=["users"])  # POST /users, /login
