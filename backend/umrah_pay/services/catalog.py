"""
Catalog Service — the fixed list of purchasable Umrah packages.
"""
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict

from umrah_pay.exceptions import PackageNotFound

# Hidden from public listings, still resolvable by id.
FREE_APPLICATION_PACKAGE_ID = 999


class Package(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: int  # INR, decimal units
    description: str


DEFAULT_PACKAGES: tuple[Package, ...] = (
    Package(
        id=1,
        name="Essential Package",
        price=69999,
        description="Comprehensive Umrah package with essential services",
    ),
    Package(
        id=2,
        name="Premium Package",
        price=79999,
        description="Enhanced comfort with premium services",
    ),
    Package(
        id=3,
        name="Luxury Package",
        price=110000,
        description="Ultimate luxury experience with business class travel",
    ),
    Package(
        id=FREE_APPLICATION_PACKAGE_ID,
        name="Free Umrah Application",
        price=11,
        description="Application for free Umrah opportunity",
    ),
)


class Catalog:
    """Read-only package lookup, built once at startup."""

    def __init__(self, packages: Optional[Iterable[Package]] = None):
        self._packages = tuple(DEFAULT_PACKAGES if packages is None else packages)
        self._by_id = {pkg.id: pkg for pkg in self._packages}

    def list_public(self) -> list[Package]:
        """All packages except the free-application sentinel, in catalog order."""
        return [pkg for pkg in self._packages if pkg.id != FREE_APPLICATION_PACKAGE_ID]

    def get_by_id(self, package_id: Union[int, str]) -> Package:
        """Resolve a package by id.

        Raises:
            PackageNotFound: no package carries this id.
        """
        pkg = self._by_id.get(package_id)
        if pkg is None:
            raise PackageNotFound(package_id)
        return pkg
