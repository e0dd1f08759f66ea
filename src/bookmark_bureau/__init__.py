"""bookmark-bureau: operation pipelines for the bookmark service layer.

Wraps business operations with ordered cross-cutting concerns such as
transactions and logging.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import (
    InMemoryTransactionalStore,
    InMemoryUnitOfWork,
    SQLAlchemyTransactionalStore,
    SQLAlchemyUnitOfWork,
)

# ── Configuration ───────────────────────────────────────────────
from .config import (
    DatabaseConfig,
    LoggerConfig,
    MysqlDatabaseConfig,
    PostgresDatabaseConfig,
    SqliteDatabaseConfig,
)

# ── Middleware ──────────────────────────────────────────────────
from .middleware import LoggingMiddleware, TransactionMiddleware

# ── Pipelines ───────────────────────────────────────────────────
from .pipeline import NoPipeline, OperationHandler, Pipeline, build_chain

# ── Ports ───────────────────────────────────────────────────────
from .ports import (
    IPipeline,
    IPipelineMiddleware,
    ITransactionalStore,
    Operation,
    UnitOfWork,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    BookmarkBureauError,
    ConfigurationError,
    InactiveUnitOfWorkError,
    OperationPipelineError,
    PersistenceError,
    TransactionStateError,
    UnitOfWorkError,
)

# ── Service ─────────────────────────────────────────────────────
from .service import (
    CategoryServicePipelines,
    DashboardServicePipelines,
    FavoriteServicePipelines,
    LinkServicePipelines,
    ServicePipelines,
    TagServicePipelines,
    UserServicePipelines,
)

__all__ = [
    # Adapters
    "InMemoryTransactionalStore",
    "InMemoryUnitOfWork",
    "SQLAlchemyTransactionalStore",
    "SQLAlchemyUnitOfWork",
    # Configuration
    "DatabaseConfig",
    "LoggerConfig",
    "MysqlDatabaseConfig",
    "PostgresDatabaseConfig",
    "SqliteDatabaseConfig",
    # Middleware
    "LoggingMiddleware",
    "TransactionMiddleware",
    # Pipelines
    "NoPipeline",
    "OperationHandler",
    "Pipeline",
    "build_chain",
    # Ports
    "IPipeline",
    "IPipelineMiddleware",
    "ITransactionalStore",
    "Operation",
    "UnitOfWork",
    # Primitives
    "BookmarkBureauError",
    "ConfigurationError",
    "InactiveUnitOfWorkError",
    "OperationPipelineError",
    "PersistenceError",
    "TransactionStateError",
    "UnitOfWorkError",
    # Service
    "CategoryServicePipelines",
    "DashboardServicePipelines",
    "FavoriteServicePipelines",
    "LinkServicePipelines",
    "ServicePipelines",
    "TagServicePipelines",
    "UserServicePipelines",
]

__version__ = "0.1.0"
