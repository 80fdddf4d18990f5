# app/api/routers/carts.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.data.database import get_cart_repo, get_product_repo
from app.domain.schemas import CartEnvelope, CartLinesEnvelope, error_body
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.services.cart_service import CartService

router = APIRouter(prefix="/api/carts", tags=["carts"])


def get_service(
    repo: CartRepo = Depends(get_cart_repo),
    product_repo: ProductRepo = Depends(get_product_repo),
) -> CartService:
    return CartService(repo=repo, product_repo=product_repo)


@router.post("", response_model=CartEnvelope, status_code=201)
def create_cart(svc: CartService = Depends(get_service)):
    return {"status": "success", "payload": svc.create_cart()}


@router.get("/{cid}", response_model=CartLinesEnvelope)
def get_cart(cid: str, svc: CartService = Depends(get_service)):
    cart = svc.get_cart(cid)
    if cart is None:
        return JSONResponse(status_code=404, content=error_body(f"Cart with id {cid} not found"))
    lines = cart.get("products", [])
    return {"status": "success", "payload": lines, "total": len(lines)}


@router.post("/{cid}/product/{pid}", response_model=CartEnvelope)
def add_product(cid: str, pid: str, svc: CartService = Depends(get_service)):
    return {"status": "success", "payload": svc.add_product(cid, pid)}
