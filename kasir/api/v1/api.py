"""
Main API router.
"""
from fastapi import APIRouter

from kasir.api.v1.endpoints import (
    auth,
    users,
    kategori,
    jenis,
    barang,
    supplier,
    pelanggan,
    pembelian,
    penjualan,
    dashboard,
    reports,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(kategori.router, prefix="/kategori", tags=["catalog"])
api_router.include_router(jenis.router, prefix="/jenis", tags=["catalog"])
api_router.include_router(barang.router, prefix="/barang", tags=["catalog"])
api_router.include_router(supplier.router, prefix="/supplier", tags=["parties"])
api_router.include_router(pelanggan.router, prefix="/pelanggan", tags=["parties"])
api_router.include_router(pembelian.router, prefix="/pembelian", tags=["purchases"])
api_router.include_router(penjualan.router, prefix="/penjualan", tags=["sales"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
