"""
Bev's Bakery Backend - HTML Pages
==================================

What:  The marketing page with the order-request form, and the admin
       dashboard listing every order.
How:   Jinja2 templates from bakery/templates. The order form submits JSON
       to POST /api/orders from the browser; the admin pages use plain HTML
       form posts and a session cookie.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from bakery.exceptions import AuthenticationError, DatabaseError, ValidationError
from bakery.services import admin_auth
from bakery.services.catalog import PRODUCTS, format_price
from bakery.services.order_service import order_service
from bakery.services.order_storage import OrderStorage, get_order_storage

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["price"] = format_price

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "home.html",
        {"products": list(PRODUCTS.values())},
    )


@router.get("/admin", response_class=HTMLResponse)
async def admin_dashboard(
    request: Request,
    storage: OrderStorage = Depends(get_order_storage),
) -> HTMLResponse:
    """
    Login form for anonymous visitors; the orders table once the session
    carries the admin flag.
    """
    if not admin_auth.is_admin(request.session):
        return templates.TemplateResponse(request, "admin_login.html", {})

    try:
        orders = await storage.get_all_orders()
    except DatabaseError as exc:
        return templates.TemplateResponse(
            request,
            "admin_orders.html",
            {"dashboard": order_service.summarize([]), "error": exc.message},
            status_code=500,
            headers={"Cache-Control": "no-store"},
        )

    dashboard = order_service.summarize(orders)
    return templates.TemplateResponse(
        request,
        "admin_orders.html",
        {"dashboard": dashboard},
        headers={"Cache-Control": "no-store"},
    )


@router.post("/admin/login", response_class=HTMLResponse)
async def admin_login(
    request: Request,
    username: str = Form(default=""),
    password: str = Form(default=""),
):
    try:
        admin_auth.authenticate_admin(username, password)
    except ValidationError as exc:
        return templates.TemplateResponse(
            request,
            "admin_login.html",
            {"error": exc.message, "username": username},
            status_code=400,
        )
    except AuthenticationError as exc:
        return templates.TemplateResponse(
            request,
            "admin_login.html",
            {"error": exc.message, "username": username},
            status_code=401,
        )

    admin_auth.log_in(request.session)
    return RedirectResponse(url="/admin", status_code=303)


@router.post("/admin/logout")
async def admin_logout(request: Request) -> RedirectResponse:
    admin_auth.log_out(request.session)
    return RedirectResponse(url="/admin", status_code=303)
