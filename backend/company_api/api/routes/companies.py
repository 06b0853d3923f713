from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from company_api.api.deps import get_service
from company_api.core.errors import (
    CreateCompanyError,
    DeleteCompanyError,
    GetCompanyError,
    UpdateCompanyError,
    caused_by_not_found,
)
from company_api.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from company_api.services.company_service import CompanyService

router = APIRouter()


@router.get("/{company_id}", response_model=CompanyOut)
def get_company(company_id: UUID, service: CompanyService = Depends(get_service)):
    try:
        return service.get_company(company_id)
    except GetCompanyError as e:
        if caused_by_not_found(e):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"company {company_id} not found")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=CompanyOut)
def create_company(payload: CompanyCreate, service: CompanyService = Depends(get_service)):
    try:
        return service.create_company(payload)
    except CreateCompanyError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.put("", response_model=CompanyOut)
def update_company(payload: CompanyUpdate, service: CompanyService = Depends(get_service)):
    """Partial update: fields missing from the body keep their stored value."""
    try:
        return service.update_company(payload)
    except UpdateCompanyError as e:
        detail = f"company {payload.id} not found" if caused_by_not_found(e) else str(e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.delete("/{company_id}")
def delete_company(company_id: UUID, service: CompanyService = Depends(get_service)):
    try:
        service.delete_company(company_id)
    except DeleteCompanyError as e:
        if caused_by_not_found(e):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"company {company_id} not found")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")
