"""Service-layer wiring of operation pipelines."""

from .pipelines import (
    CategoryServicePipelines,
    DashboardServicePipelines,
    FavoriteServicePipelines,
    LinkServicePipelines,
    ServicePipelines,
    TagServicePipelines,
    UserServicePipelines,
)

__all__ = [
    "CategoryServicePipelines",
    "DashboardServicePipelines",
    "FavoriteServicePipelines",
    "LinkServicePipelines",
    "ServicePipelines",
    "TagServicePipelines",
    "UserServicePipelines",
]
