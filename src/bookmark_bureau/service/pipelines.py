"""Per-operation pipeline sets for the service layer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import Self

from ..middleware.logging import LoggingMiddleware
from ..pipeline.no_pipeline import NoPipeline
from ..primitives.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..config.database import DatabaseConfig
    from ..ports.pipeline import IPipeline


class ServicePipelines:
    """The pipeline each operation of one service runs through.

    Every operation falls back to ``default`` unless it was given its own
    pipeline. Operations are looked up with :meth:`get` or as attributes::

        pipelines = LinkServicePipelines(
            default=config.default_pipeline(),
            search_links=NoPipeline(),
        )
        pipelines.create_link.run(save_link, link)

    Subclasses list their operation names in ``operations``; any other name
    raises :class:`ConfigurationError`.
    """

    service_name: ClassVar[str] = ""
    operations: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        default: IPipeline | None = None,
        **overrides: IPipeline,
    ) -> None:
        unknown = sorted(set(overrides) - set(self.operations))
        if unknown:
            raise ConfigurationError(
                f"Unknown operation(s) for {type(self).__name__}: {', '.join(unknown)}"
            )
        self._default: IPipeline = default if default is not None else NoPipeline()
        self._overrides: dict[str, IPipeline] = dict(overrides)

    @classmethod
    def from_database(cls, config: DatabaseConfig, **overrides: IPipeline) -> Self:
        """Use the transactional default pipeline of *config* for every operation."""
        return cls(default=config.default_pipeline(), **overrides)

    @property
    def default(self) -> IPipeline:
        return self._default

    def get(self, operation: str) -> IPipeline:
        if operation not in self.operations:
            raise ConfigurationError(
                f"Unknown operation for {type(self).__name__}: {operation}"
            )
        return self._overrides.get(operation, self._default)

    def with_logging(
        self,
        logger: logging.Logger | logging.LoggerAdapter[Any],
        level: int | str = logging.DEBUG,
    ) -> Self:
        """Return a copy logging every operation as ``"{service}.{operation}"``.

        The logging middleware is appended to each operation's pipeline, so it
        runs inside any transaction the pipeline already opens.
        """
        pipelines: dict[str, IPipeline] = {}
        for operation in self.operations:
            pipeline = self.get(operation)
            with_middleware = getattr(pipeline, "with_middleware", None)
            if with_middleware is None:
                raise ConfigurationError(
                    f"Pipeline for {operation} cannot be extended with middleware"
                )
            pipelines[operation] = with_middleware(
                LoggingMiddleware(logger, f"{self.service_name}.{operation}", level)
            )
        return type(self)(default=self._default, **pipelines)

    def __getattr__(self, name: str) -> IPipeline:
        if name.startswith("_") or name not in type(self).operations:
            raise AttributeError(name)
        return self.get(name)


class LinkServicePipelines(ServicePipelines):
    service_name = "links"
    operations = (
        "get_link",
        "create_link",
        "update_link",
        "delete_link",
        "search_links",
        "get_links_by_tag",
        "get_links",
    )


class TagServicePipelines(ServicePipelines):
    service_name = "tags"
    operations = (
        "get_tag",
        "get_all_tags",
        "create_tag",
        "update_tag",
        "delete_tag",
        "add_tag_to_link",
        "remove_tag_from_link",
    )


class CategoryServicePipelines(ServicePipelines):
    service_name = "categories"
    operations = (
        "get_category",
        "get_categories_for_dashboard",
        "create_category",
        "update_category",
        "delete_category",
        "reorder_categories",
        "add_link_to_category",
        "remove_link_from_category",
        "reorder_links_in_category",
    )


class DashboardServicePipelines(ServicePipelines):
    service_name = "dashboards"
    operations = (
        "get_dashboard",
        "get_full_dashboard",
        "get_all_dashboards",
        "create_dashboard",
        "update_dashboard",
        "delete_dashboard",
    )


class FavoriteServicePipelines(ServicePipelines):
    service_name = "favorites"
    operations = (
        "add_favorite",
        "remove_favorite",
        "get_favorites_for_dashboard",
        "reorder_favorites",
    )


class UserServicePipelines(ServicePipelines):
    service_name = "users"
    operations = (
        "get_user",
        "get_user_by_email",
        "list_all_users",
        "create_user",
        "change_password",
        "enable_totp",
        "disable_totp",
        "delete_user",
    )
