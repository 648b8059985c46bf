# kakeibo/routes_charts.py
"""
Standalone SVG images of the dashboard charts.

Same data and renderers as the dashboard, served as image/svg+xml so the
charts can be linked or saved on their own.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

import config
from kakeibo.charts.line import render_line_chart
from kakeibo.charts.pie import render_pie_chart
from kakeibo.charts.svg import to_svg
from kakeibo.deps import get_db
from kakeibo.services.summaries import (
    expense_line_series,
    expense_pie_series,
    get_monthly_summary,
    get_monthly_trends,
    month_range,
)

router = APIRouter(prefix="/charts")

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/expenses-by-category.svg")
def expenses_by_category_svg(
    month: str | None = Query(None),
    width: int = Query(400, ge=100, le=4000),
    height: int = Query(400, ge=100, le=4000),
    db: Session = Depends(get_db),
):
    month_start, _, _ = month_range(month)
    summary = get_monthly_summary(db, month_start.year, month_start.month)
    series = expense_pie_series(summary, config.CATEGORY_COLORS)

    drawable = render_pie_chart(series, width, height, colors=config.CATEGORY_COLORS)
    return Response(content=str(to_svg(drawable)), media_type=SVG_MEDIA_TYPE)


@router.get("/expense-trend.svg")
def expense_trend_svg(
    months: int = Query(config.TREND_MONTHS, ge=1, le=60),
    width: int = Query(600, ge=100, le=4000),
    height: int = Query(300, ge=100, le=4000),
    db: Session = Depends(get_db),
):
    series = expense_line_series(get_monthly_trends(db, months=months))

    drawable = render_line_chart(series, width, height)
    return Response(content=str(to_svg(drawable)), media_type=SVG_MEDIA_TYPE)
