"""
Package Routes — public catalog listing and lookup.
"""
from fastapi import APIRouter, Depends

from umrah_pay.dependencies import get_catalog
from umrah_pay.schemas.schemas import PackageDetailResponse, PackageListResponse
from umrah_pay.services.catalog import Catalog

router = APIRouter(prefix="/api/packages", tags=["Packages"])


@router.get("", response_model=PackageListResponse)
def list_packages(catalog: Catalog = Depends(get_catalog)):
    """List purchasable packages (the free-application entry is hidden)."""
    return PackageListResponse(packages=[pkg.model_dump() for pkg in catalog.list_public()])


@router.get("/{package_id}", response_model=PackageDetailResponse)
def get_package(package_id: int, catalog: Catalog = Depends(get_catalog)):
    """Get a single package, including the hidden free-application entry."""
    return PackageDetailResponse(package=catalog.get_by_id(package_id).model_dump())
