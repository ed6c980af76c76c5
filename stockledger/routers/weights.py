from typing import List

from fastapi import APIRouter, Depends, status

from ..core.errors import ApiError
from ..schemas.weights import Weight, WeightCreate, WeightUpdate
from ..services.weights import WeightAccessor
from ..services.deps import get_weight_accessor
from .errors import http_error

router = APIRouter()


@router.get("/", response_model=List[Weight])
def list_weights(weights: WeightAccessor = Depends(get_weight_accessor)):
    try:
        return weights.list()
    except ApiError as e:
        raise http_error(e)


@router.post("/", response_model=Weight, status_code=status.HTTP_201_CREATED)
def create_weight(payload: WeightCreate, weights: WeightAccessor = Depends(get_weight_accessor)):
    try:
        return weights.create(payload)
    except ApiError as e:
        raise http_error(e)


@router.put("/{weight_id}", response_model=Weight)
def update_weight(
    weight_id: int,
    payload: WeightUpdate,
    weights: WeightAccessor = Depends(get_weight_accessor),
):
    try:
        return weights.update(weight_id, payload)
    except ApiError as e:
        raise http_error(e)


@router.delete("/{weight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_weight(weight_id: int, weights: WeightAccessor = Depends(get_weight_accessor)):
    try:
        weights.delete(weight_id)
    except ApiError as e:
        raise http_error(e)
