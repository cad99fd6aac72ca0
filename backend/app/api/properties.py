from fastapi import APIRouter, Depends, HTTPException, status

from app.core.metrics import lease_status
from app.core.portfolio import compute_property_balance, filter_properties
from app.db.repository import PortfolioRepository, get_repository
from app.schemas.dashboard import LeaseStatusResponse, PropertyBalanceResponse
from app.schemas.property import PropertyCreate, PropertyRecord, PropertyUpdate

router = APIRouter()

NOT_FOUND = "Imóvel não encontrado."


def _get_property_or_404(property_id: str, repo: PortfolioRepository) -> PropertyRecord:
    prop = repo.get_property(property_id)
    if not prop:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return prop


@router.get("/", response_model=list[PropertyRecord])
def list_properties(
    search: str = "",
    status: str | None = None,
    repo: PortfolioRepository = Depends(get_repository),
):
    return filter_properties(repo.list_properties(), search=search, status=status)


@router.post("/", response_model=PropertyRecord, status_code=status.HTTP_201_CREATED)
def create_property(data: PropertyCreate, repo: PortfolioRepository = Depends(get_repository)):
    return repo.create_property(data)


@router.get("/{property_id}", response_model=PropertyRecord)
def get_property(property_id: str, repo: PortfolioRepository = Depends(get_repository)):
    return _get_property_or_404(property_id, repo)


@router.patch("/{property_id}", response_model=PropertyRecord)
def update_property(
    property_id: str,
    data: PropertyUpdate,
    repo: PortfolioRepository = Depends(get_repository),
):
    prop = repo.patch_property(property_id, data)
    if not prop:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return prop


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(property_id: str, repo: PortfolioRepository = Depends(get_repository)):
    # Transactions of the property go with it
    if not repo.delete_property(property_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)


@router.get("/{property_id}/summary", response_model=PropertyBalanceResponse)
def property_summary(property_id: str, repo: PortfolioRepository = Depends(get_repository)):
    _get_property_or_404(property_id, repo)
    summary = compute_property_balance(repo.list_transactions(property_id=property_id))
    return PropertyBalanceResponse(
        property_id=property_id,
        total_income=float(summary.total_income),
        total_expenses=float(summary.total_expenses),
        balance=float(summary.balance),
        transaction_count=summary.transaction_count,
    )


@router.get("/{property_id}/expiration", response_model=LeaseStatusResponse)
def property_expiration(property_id: str, repo: PortfolioRepository = Depends(get_repository)):
    return LeaseStatusResponse.model_validate(lease_status(_get_property_or_404(property_id, repo)))
