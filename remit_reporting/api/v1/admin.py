"""/v1/admin - admin registration and collaborator address configuration"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from remit_reporting.api.v1.schemas import AdminResponse, ContractAddressesSchema, InitRequest
from remit_reporting.api.dependencies import get_caller, get_request_id
from remit_reporting.domain.access import require_admin, require_caller
from remit_reporting.domain.exceptions import AlreadyInitializedError
from remit_reporting.domain.models import ContractAddresses, ReportEvent
from remit_reporting.infrastructure.database.repositories import ConfigurationRepository, EventRepository
from remit_reporting.infrastructure.database.session import get_db, unit_of_work
from remit_reporting.infrastructure.observability.logging import log_event

router = APIRouter()


@router.post("/admin/init", response_model=AdminResponse)
def init(
    request_body: InitRequest,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """Register the admin identity; the admin must be the caller and can only be set once"""
    require_caller(caller, request_body.admin, "register as admin")

    with unit_of_work(db):
        config_repo = ConfigurationRepository(db)
        if config_repo.get_admin() is not None:
            raise AlreadyInitializedError("Reporting already initialized")
        config_repo.set_admin(request_body.admin)

    logging.info("Admin registered", extra={"admin": request_body.admin})
    return AdminResponse(admin=request_body.admin)


@router.put("/admin/addresses", response_model=ContractAddressesSchema)
def configure_addresses(
    request_body: ContractAddressesSchema,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """
    Point the service at its collaborators (admin only).

    Replaces any previous configuration and records an addresses_configured event.
    """
    addresses = ContractAddresses(**request_body.model_dump())

    with unit_of_work(db):
        config_repo = ConfigurationRepository(db)
        require_admin(caller, config_repo.get_admin())
        config_repo.set_addresses(addresses, configured_by=caller)
        payload = {"caller": caller}
        EventRepository(db).record(ReportEvent.ADDRESSES_CONFIGURED, payload)

    log_event(get_request_id(request), ReportEvent.ADDRESSES_CONFIGURED.value, payload)
    return ContractAddressesSchema.model_validate(addresses)


@router.get("/admin/addresses", response_model=ContractAddressesSchema)
def get_addresses(db: Session = Depends(get_db)):
    """Currently configured collaborator addresses"""
    addresses = ConfigurationRepository(db).get_addresses()
    if addresses is None:
        raise HTTPException(status_code=404, detail="Addresses not configured")
    return ContractAddressesSchema.model_validate(addresses)


@router.get("/admin", response_model=AdminResponse)
def get_admin(db: Session = Depends(get_db)):
    admin = ConfigurationRepository(db).get_admin()
    if admin is None:
        raise HTTPException(status_code=404, detail="Admin not initialized")
    return AdminResponse(admin=admin)
