from bookmark_bureau.ports.middleware import IPipelineMiddleware
from bookmark_bureau.ports.pipeline import IPipeline, Operation
from bookmark_bureau.ports.transactional_store import ITransactionalStore
from bookmark_bureau.ports.unit_of_work import UnitOfWork

__all__ = [
    "IPipeline",
    "IPipelineMiddleware",
    "ITransactionalStore",
    "Operation",
    "UnitOfWork",
]
