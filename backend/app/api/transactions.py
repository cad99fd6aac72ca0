from fastapi import APIRouter, Depends, HTTPException, status

from app.db.repository import PortfolioRepository, get_repository
from app.schemas.transaction import VALID_TYPES, TransactionCreate, TransactionRecord
from app.utils.category_loader import get_category_options

router = APIRouter()


@router.get("/categories")
def list_categories(type: str | None = None):
    if type is not None and type not in VALID_TYPES:
        raise HTTPException(
            status_code=422, detail=f"Tipo inválido. Valores aceitos: {sorted(VALID_TYPES)}"
        )
    types = [type] if type else sorted(VALID_TYPES)
    return {t: get_category_options(t) for t in types}


@router.get("/", response_model=list[TransactionRecord])
def list_transactions(
    property_id: str | None = None,
    repo: PortfolioRepository = Depends(get_repository),
):
    return repo.list_transactions(property_id=property_id)


@router.post("/", response_model=TransactionRecord, status_code=status.HTTP_201_CREATED)
def create_transaction(data: TransactionCreate, repo: PortfolioRepository = Depends(get_repository)):
    return repo.create_transaction(data)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(transaction_id: str, repo: PortfolioRepository = Depends(get_repository)):
    if not repo.delete_transaction(transaction_id):
        raise HTTPException(status_code=404, detail="Transação não encontrada.")
