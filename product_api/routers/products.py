from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from product_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def _get_product_service(request: Request) -> ProductService:
    svc = getattr(getattr(request.app, "state", None), "product_service", None)
    if not svc:
        raise RuntimeError("ProductService not configured")
    return svc


@router.get("")
def list_products(request: Request):
    return _get_product_service(request).list_all()


@router.get("/instock")
def list_in_stock_products(request: Request):
    return _get_product_service(request).list_in_stock()


@router.post("", status_code=201)
def create_product(request: Request, payload: Any = Body(None)):
    return _get_product_service(request).create(payload)


@router.put("/{product_id}")
def update_product(product_id: str, request: Request, payload: Any = Body(None)):
    return _get_product_service(request).update(product_id, payload)


@router.delete("/{product_id}")
def delete_product(product_id: str, request: Request):
    message = _get_product_service(request).delete(product_id)
    return {"message": message}
