# money_plant/reports.py
import logging
import sqlite3
from datetime import date

from flask import Blueprint

from . import db
from .helpers import api_response

logger = logging.getLogger("money-plant.reports")

bp = Blueprint("reports", __name__)

# Week buckets start on Monday: date(d, 'weekday 0', '-6 days') is the Monday
# of d's week, so comparing those Mondays also works across a year boundary.
DASHBOARD_SQL = """
    SELECT
        ROUND(COALESCE(SUM(CASE WHEN date(transaction_date) = date(:today)
                     THEN amount ELSE 0 END), 0), 2) AS daily_total,
        ROUND(COALESCE(SUM(CASE WHEN date(transaction_date, 'weekday 0', '-6 days')
                              = date(:today, 'weekday 0', '-6 days')
                     THEN amount ELSE 0 END), 0), 2) AS weekly_total,
        ROUND(COALESCE(SUM(CASE WHEN strftime('%Y-%m', transaction_date) = strftime('%Y-%m', :today)
                     THEN amount ELSE 0 END), 0), 2) AS monthly_total,
        ROUND(COALESCE(SUM(CASE WHEN strftime('%Y', transaction_date) = strftime('%Y', :today)
                     THEN amount ELSE 0 END), 0), 2) AS yearly_total
    FROM MoneySpending
    WHERE user_id = :user_id
"""

PIE_CHART_SQL = """
    SELECT category, ROUND(SUM(amount), 2) AS total_spent
    FROM MoneySpending
    WHERE user_id = ?
    GROUP BY category
    ORDER BY total_spent DESC
"""


def dashboard_totals(user_id, today=None):
    """Daily, weekly, monthly and yearly spending totals for one user."""
    today = today or date.today()
    row = db.query_db(DASHBOARD_SQL, {"today": today.isoformat(), "user_id": user_id}, one=True)
    return {
        "daily": float(row["daily_total"]),
        "weekly": float(row["weekly_total"]),
        "monthly": float(row["monthly_total"]),
        "yearly": float(row["yearly_total"]),
    }


@bp.route("/dashboard/<row_id:user_id>", methods=["GET"])
def dashboard(user_id):
    try:
        totals = dashboard_totals(user_id)
    except sqlite3.Error:
        logger.exception("Error fetching dashboard data")
        return api_response(500, "Failed to fetch dashboard data")

    return api_response(200, data=totals)


@bp.route("/spending-pie-chart/<row_id:user_id>", methods=["GET"])
def spending_pie_chart(user_id):
    try:
        rows = db.query_db(PIE_CHART_SQL, (user_id,))
    except sqlite3.Error:
        logger.exception("Error fetching spending pie chart data")
        return api_response(500, "Failed to fetch pie chart data")

    results = [{"category": r["category"], "total_spent": float(r["total_spent"])} for r in rows]
    logger.info(f"Fetched spending data for pie chart - user {user_id}: {len(results)} categories")
    return api_response(200, data=results)
