# app/api/routers/products.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from app.data.database import get_product_repo
from app.domain.schemas import (
    MessageEnvelope,
    ProductEnvelope,
    ProductListEnvelope,
    error_body,
)
from app.repos.product_repo import ProductRepo
from app.services.product_service import ProductService, parse_limit

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(repo: ProductRepo = Depends(get_product_repo)) -> ProductService:
    return ProductService(repo)


@router.get("", response_model=ProductListEnvelope)
def list_products(
    limit: str | None = Query(None),
    svc: ProductService = Depends(get_service),
):
    products = svc.list_products(parse_limit(limit))
    return {"status": "success", "payload": products, "total": len(products)}


@router.get("/{pid}", response_model=ProductEnvelope)
def get_product(pid: str, svc: ProductService = Depends(get_service)):
    product = svc.get_product(pid)
    if product is None:
        return JSONResponse(status_code=404, content=error_body(f"Product with id {pid} not found"))
    return {"status": "success", "payload": product}


@router.post("", response_model=ProductEnvelope, status_code=201)
def create_product(
    payload: Dict[str, Any] = Body(default={}),
    svc: ProductService = Depends(get_service),
):
    return {"status": "success", "payload": svc.create_product(payload)}


@router.put("/{pid}", response_model=ProductEnvelope)
def update_product(
    pid: str,
    payload: Dict[str, Any] = Body(default={}),
    svc: ProductService = Depends(get_service),
):
    return {"status": "success", "payload": svc.update_product(pid, payload)}


@router.delete("/{pid}", response_model=MessageEnvelope)
def delete_product(pid: str, svc: ProductService = Depends(get_service)):
    svc.delete_product(pid)
    return {"status": "success", "message": f"Product {pid} deleted"}
