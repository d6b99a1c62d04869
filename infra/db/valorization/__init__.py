from infra.db.valorization.mapper import valorization_from_orm, valorization_to_orm
from infra.db.valorization.repository import SqlAlchemyValorizationRepository

__all__ = [
    "valorization_from_orm",
    "valorization_to_orm",
    "SqlAlchemyValorizationRepository",
]
