"""
Gateway registry.

Builds one ``EntityGateway`` per entity on top of the configured backend
and stores the registry on the Flask app.
"""

import logging
from typing import Dict

from flask import Flask, current_app

from nutriapp.gateway.backends.base import TableBackend
from nutriapp.gateway.entities import build_entities
from nutriapp.gateway.gateway import EntityGateway
from nutriapp.utils.enums import StorageBackend

logger = logging.getLogger(__name__)

EXTENSION_KEY = "nutriapp.gateways"


def create_backend(config) -> TableBackend:
    backend = config.get("STORAGE_BACKEND", StorageBackend.SQLALCHEMY.value)
    if backend == StorageBackend.SUPABASE.value:
        from nutriapp.gateway.backends.supabase_backend import SupabaseBackend
        return SupabaseBackend.from_credentials(config.get("SUPABASE_URL"), config.get("SUPABASE_KEY"))
    if backend == StorageBackend.SQLALCHEMY.value:
        from nutriapp.gateway.backends.sqlalchemy_backend import SQLAlchemyBackend
        from nutriapp import models
        return SQLAlchemyBackend(getattr(models, name) for name in models.__all__)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")


def build_gateways(backend: TableBackend, multi_tenant: bool, bmi_source: str) -> Dict[str, EntityGateway]:
    entities = build_entities(bmi_source)
    patients = EntityGateway(entities["patients"], backend, multi_tenant)
    gateways = {"patients": patients}
    for name, entity in entities.items():
        if name in gateways:
            continue
        parent = patients if entity.parent_column == "patient_id" else None
        gateways[name] = EntityGateway(entity, backend, multi_tenant, parent=parent)
    return gateways


def init_gateways(app: Flask, backend: TableBackend = None) -> Dict[str, EntityGateway]:
    backend = backend or create_backend(app.config)
    gateways = build_gateways(
        backend,
        multi_tenant=app.config.get("MULTI_TENANT", True),
        bmi_source=app.config.get("BMI_SOURCE", "application"),
    )
    app.extensions[EXTENSION_KEY] = gateways
    logger.info(
        "Gateways ready: backend=%s multi_tenant=%s",
        backend.name, app.config.get("MULTI_TENANT", True),
    )
    return gateways


def get_gateway(name: str) -> EntityGateway:
    return current_app.extensions[EXTENSION_KEY][name]
