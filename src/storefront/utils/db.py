"""Schema management for SQL-backed providers.

The memory provider needs no schema; only ``postgresql`` and ``sqlite``
providers are touched.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider


def _build_models(domain: Domain, provider) -> None:
    """Materialize SQLAlchemy tables for every element stored in ``provider``.

    Tables are declared lazily when a repository first builds its DAO, so the
    DAO of each aggregate and child entity (cart and order lines) is touched.
    """
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create all tables."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _build_models(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    """Drop all tables."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _build_models(domain, provider)
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
