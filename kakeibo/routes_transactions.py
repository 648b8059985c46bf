# routes_transactions.py
"""
Routes for transaction CRUD, CSV export and a JSON subcategory lookup.
"""

import logging

from fastapi import APIRouter, Request, Depends, Query
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kakeibo.deps import csrf_ok, flash, get_db, redirect, render
from kakeibo.services.categories import KAKEIBO_CATEGORIES, get_category_map, get_subcategories
from kakeibo.services.csv_export import export_filename, export_transactions_csv
from kakeibo.services.transactions import (
    add_transaction,
    delete_transaction,
    filters_from_params,
    get_transaction,
    get_transactions,
    update_transaction,
)
from kakeibo.services.validation import validate_transaction

logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------------------------------------------
# Create
# -------------------------------------------------------------------

@router.post("/transactions")
async def create_transaction(
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Handle the "Add Transaction" form on the dashboard.

    - Reject the post if the CSRF token does not match the session
    - Validate fields and apply the expense/income sign
    - Insert the row and redirect back to the dashboard
    """
    form = await request.form()

    if not csrf_ok(request, form):
        return redirect("/dashboard")

    data, errors = validate_transaction(form)
    if errors:
        flash(request, "; ".join(errors), "error")
        return redirect("/dashboard")

    try:
        add_transaction(db, data)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to add transaction")
        flash(request, "Failed to add transaction.", "error")
        return redirect("/dashboard")

    flash(request, "Transaction added successfully!")
    return redirect("/dashboard")


# -------------------------------------------------------------------
# Edit
# -------------------------------------------------------------------

@router.get("/transactions/{tx_id}/edit", response_class=HTMLResponse)
def edit_transaction_page(
    tx_id: int,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Render the edit form pre-filled with the stored values.
    Unknown ids go back to the dashboard.
    """
    tx = get_transaction(db, tx_id)
    if tx is None:
        flash(request, f"Transaction #{tx_id} not found.", "error")
        return redirect("/dashboard")

    return render(
        request,
        "edit.html",
        {
            "tx": tx,
            "categories": KAKEIBO_CATEGORIES,
            "category_map": get_category_map(db),
        },
    )


@router.post("/transactions/{tx_id}/edit")
async def edit_transaction(
    tx_id: int,
    request: Request,
    db: Session = Depends(get_db),
):
    form = await request.form()
    edit_url = f"/transactions/{tx_id}/edit"

    if not csrf_ok(request, form):
        return redirect(edit_url)

    data, errors = validate_transaction(form)
    if errors:
        flash(request, "; ".join(errors), "error")
        return redirect(edit_url)

    try:
        tx = update_transaction(db, tx_id, data)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update transaction id=%s", tx_id)
        flash(request, "Failed to update transaction.", "error")
        return redirect(edit_url)

    if tx is None:
        flash(request, f"Transaction #{tx_id} not found.", "error")
        return redirect("/dashboard")

    flash(request, "Transaction updated successfully!")
    return redirect("/dashboard")


# -------------------------------------------------------------------
# Delete
# -------------------------------------------------------------------

@router.post("/transactions/{tx_id}/delete")
async def remove_transaction(
    tx_id: int,
    request: Request,
    db: Session = Depends(get_db),
):
    form = await request.form()

    if not csrf_ok(request, form):
        return redirect("/dashboard")

    try:
        deleted = delete_transaction(db, tx_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete transaction id=%s", tx_id)
        deleted = False

    if deleted:
        flash(request, "Transaction deleted successfully!")
    else:
        flash(request, "Failed to delete transaction.", "error")
    return redirect("/dashboard")


# -------------------------------------------------------------------
# CSV export
# -------------------------------------------------------------------

def _csv_response(csv_text: str) -> Response:
    return Response(
        content=csv_text.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.get("/export.csv")
def export_csv(
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Download the transactions matching the dashboard filters
    (start_date, end_date, category, search) as CSV.
    """
    transactions = get_transactions(db, filters_from_params(request.query_params))
    logger.info("Exporting %d transactions to CSV", len(transactions))
    return _csv_response(export_transactions_csv(transactions))


@router.post("/export.csv")
async def export_csv_post(
    request: Request,
    db: Session = Depends(get_db),
):
    form = await request.form()

    if not csrf_ok(request, form):
        return redirect("/dashboard")

    transactions = get_transactions(db, filters_from_params(form))
    logger.info("Exporting %d transactions to CSV", len(transactions))
    return _csv_response(export_transactions_csv(transactions))


# -------------------------------------------------------------------
# Subcategory lookup (standalone JSON; the form embeds the full category map)
# -------------------------------------------------------------------

@router.get("/api/subcategories")
def subcategories(
    category: str = Query(""),
    db: Session = Depends(get_db),
):
    return {"category": category, "subcategories": get_subcategories(db, category)}
