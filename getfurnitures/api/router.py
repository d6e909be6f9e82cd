"""Main API router"""

from fastapi import APIRouter

from .routes import auth, admin_auth, products, favourites, orders, users, admin

# Main API router
api_router = APIRouter()

# Public: no token
api_router.include_router(auth.router, prefix="/public", tags=["auth"])
api_router.include_router(admin_auth.router, prefix="/public", tags=["admin-auth"])

# Private: bearer token
api_router.include_router(products.router, prefix="/private", tags=["products"])
api_router.include_router(favourites.router, prefix="/private", tags=["favourites"])
api_router.include_router(orders.router, prefix="/private", tags=["orders"])
api_router.include_router(users.router, prefix="/private", tags=["users"])
api_router.include_router(admin.router, prefix="/private", tags=["admin"])
