"""Splits: compute per-participant shares for one expense and check them."""
from fastapi import APIRouter, HTTPException

from easysplit.schemas import SplitRequest, SplitResponse, ValidateRequest, ValidationResult
from easysplit.services.split_calculator import UnknownSplitTypeError, compute_splits
from easysplit.services.split_validator import validate_splits

router = APIRouter(prefix="/splits", tags=["splits"])


@router.post("", response_model=SplitResponse)
def create_splits(data: SplitRequest):
    params = {}
    if data.amounts is not None:
        params["amounts"] = data.amounts
    if data.percentages is not None:
        params["percentages"] = data.percentages
    try:
        splits = compute_splits(data.total_amount, data.participants, data.split_type, params)
    except UnknownSplitTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SplitResponse(
        splits=splits,
        validation=validate_splits(splits, data.total_amount, data.split_type),
    )


@router.post("/validate", response_model=ValidationResult)
def check_splits(data: ValidateRequest):
    return validate_splits(data.splits, data.total_amount, data.split_type)
