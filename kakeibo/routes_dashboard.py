# kakeibo/routes_dashboard.py

from datetime import date
from urllib.parse import urlencode

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

import config
from .deps import get_db, render
from kakeibo.charts.line import render_line_chart
from kakeibo.charts.pie import render_pie_chart
from kakeibo.charts.svg import to_svg
from kakeibo.services.categories import KAKEIBO_CATEGORIES, get_category_map
from kakeibo.services.summaries import (
    expense_line_series,
    expense_pie_series,
    get_monthly_summary,
    get_monthly_trends,
    month_range,
)
from kakeibo.services.transactions import filters_from_params, get_transactions

router = APIRouter()

FILTER_KEYS = ("start_date", "end_date", "category", "search")


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    db: Session = Depends(get_db),
):
    params = request.query_params
    month_start, _, current_month = month_range(params.get("month"))

    summary = get_monthly_summary(db, month_start.year, month_start.month)
    trends = get_monthly_trends(db, months=config.TREND_MONTHS, today=month_start)

    pie_svg = to_svg(
        render_pie_chart(
            expense_pie_series(summary, config.CATEGORY_COLORS),
            400,
            400,
            colors=config.CATEGORY_COLORS,
        )
    )
    line_svg = to_svg(render_line_chart(expense_line_series(trends), 400, 300))

    filters = filters_from_params(params)
    transactions = get_transactions(db, filters)

    # Export link keeps the active filters
    export_query = urlencode({k: params[k] for k in FILTER_KEYS if params.get(k)})

    return render(
        request,
        "dashboard.html",
        {
            "current_month": current_month,
            "month_label": month_start.strftime("%B %Y"),
            "totals": summary["totals"],
            "by_category": summary["by_category"],
            "trend_months": config.TREND_MONTHS,
            "pie_svg": pie_svg,
            "line_svg": line_svg,
            "transactions": transactions,
            "filters": {k: params.get(k, "") for k in FILTER_KEYS},
            "categories": KAKEIBO_CATEGORIES,
            "category_map": get_category_map(db),
            "export_url": "/export.csv" + (f"?{export_query}" if export_query else ""),
            "today": date.today().isoformat(),
        },
    )
