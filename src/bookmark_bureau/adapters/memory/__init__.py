from .transactional_store import InMemoryTransactionalStore
from .unit_of_work import InMemoryUnitOfWork, in_memory_unit_of_work_factory

__all__ = [
    "InMemoryTransactionalStore",
    "InMemoryUnitOfWork",
    "in_memory_unit_of_work_factory",
]
