from __future__ import annotations

import uuid
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from cartview.config import settings
from cartview.constants import SESSION_COOKIE
from cartview.services.synchronizer import CartSessions, CartSynchronizer

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

app = FastAPI(title="Cart View")
app.state.sessions = CartSessions()

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def _reader(request: Request) -> CartSynchronizer:
    # reads never register a cart; unknown sessions see the seed cart
    sessions: CartSessions = request.app.state.sessions
    return sessions.peek(request.cookies.get(SESSION_COOKIE)) or sessions.fresh()


def _writer(request: Request) -> tuple[str, CartSynchronizer]:
    key = request.cookies.get(SESSION_COOKIE) or uuid.uuid4().hex
    return key, request.app.state.sessions.get(key)


def _back_to_cart(key: Optional[str], msg: Optional[str] = None) -> RedirectResponse:
    url = "/cart" if msg is None else f"/cart?msg={quote(msg)}"
    response = RedirectResponse(url=url, status_code=303)
    if key:
        response.set_cookie(SESSION_COOKIE, key, httponly=True, samesite="lax")
    return response


@app.get("/")
def index():
    return RedirectResponse(url="/cart", status_code=303)


@app.get("/cart", response_class=HTMLResponse)
def cart_page(request: Request, msg: str = ""):
    sync = _reader(request)
    return templates.TemplateResponse(
        request,
        "cart.html",
        {"view": sync.view, "message": msg},
    )


@app.post("/cart/quantity")
def cart_quantity(request: Request, item_id: str = Form(...), quantity: str = Form("")):
    key, sync = _writer(request)
    sync.set_quantity(item_id, quantity)
    return _back_to_cart(key)


@app.post("/cart/remove")
def cart_remove(request: Request, item_id: str = Form(...)):
    key, sync = _writer(request)
    sync.remove_item(item_id)
    return _back_to_cart(key)


@app.post("/cart/checkout")
def cart_checkout(request: Request):
    sync = _reader(request)
    return _back_to_cart(None, sync.checkout())


@app.get("/cart/summary")
def cart_summary(request: Request):
    sync = _reader(request)
    totals = sync.compute_totals()
    return JSONResponse({
        "items": sync.ledger.ids,
        "item_count": totals.item_count,
        "subtotal": str(totals.subtotal),
        "tax": str(totals.tax),
        "shipping": str(totals.shipping_fee),
        "total": str(totals.grand_total),
        "currency": settings.currency,
    })
