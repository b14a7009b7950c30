# money_plant/goals.py
import logging
import sqlite3

from flask import Blueprint

from . import db
from .helpers import api_response, missing_fields, parse_amount, parse_row_id, request_data
from .models import Goal

logger = logging.getLogger("money-plant.goals")

bp = Blueprint("goals", __name__, url_prefix="/goals")

REQUIRED_FIELDS = ["goal_amount", "created_by"]


def validate_goal(data):
    if missing_fields(data, REQUIRED_FIELDS):
        return None, "Missing required fields."
    goal_amount = parse_amount(data.get("goal_amount"))
    if goal_amount is None:
        return None, "Invalid goal_amount format"
    created_by = parse_row_id(data.get("created_by"))
    if created_by is None:
        return None, "Invalid created_by"
    return (goal_amount, created_by), None


@bp.route("", methods=["GET"])
def list_goals():
    try:
        rows = db.query_db("SELECT * FROM goals ORDER BY created_date DESC, id DESC")
    except sqlite3.Error:
        logger.exception("Error fetching goal records")
        return api_response(500, "Failed to fetch goal records")

    logger.info(f"Fetched {len(rows)} goal records")
    return api_response(200, data=[Goal.from_row(r).to_dict() for r in rows])


@bp.route("/<row_id:goal_id>", methods=["GET"])
def get_goal(goal_id):
    try:
        row = db.query_db("SELECT * FROM goals WHERE id = ?", (goal_id,), one=True)
    except sqlite3.Error:
        logger.exception("Error fetching goal by ID")
        return api_response(500, "Failed to fetch goal")

    if row is None:
        logger.warning(f"Goal {goal_id} not found")
        return api_response(404, "Goal not found")
    return api_response(200, data=Goal.from_row(row).to_dict())


@bp.route("/user/<row_id:user_id>", methods=["GET"])
def list_user_goals(user_id):
    try:
        rows = db.query_db(
            "SELECT * FROM goals WHERE created_by = ? ORDER BY created_date DESC, id DESC",
            (user_id,)
        )
    except sqlite3.Error:
        logger.exception("Error fetching goal records for user")
        return api_response(500, "Failed to fetch goal records")

    logger.info(f"Fetched {len(rows)} goal records for user {user_id}")
    return api_response(200, data=[Goal.from_row(r).to_dict() for r in rows])


@bp.route("", methods=["POST"])
def create_goal():
    data = request_data()
    values, error = validate_goal(data)
    if error:
        return api_response(400, error)

    try:
        goal_id, affected = db.execute_db(
            "INSERT INTO goals (goal_amount, created_by) VALUES (?, ?)",
            values
        )
    except sqlite3.Error:
        logger.exception("Error inserting goal")
        return api_response(500, "Failed to insert goal")

    logger.info(f"Goal created successfully - ID: {goal_id}")
    return api_response(201, "Goal added successfully", {"id": goal_id, "affected_rows": affected})


@bp.route("/<row_id:goal_id>", methods=["PUT"])
def update_goal(goal_id):
    data = request_data()
    values, error = validate_goal(data)
    if error:
        return api_response(400, error)

    try:
        _, affected = db.execute_db(
            "UPDATE goals SET goal_amount = ?, created_by = ? WHERE id = ?",
            (*values, goal_id)
        )
    except sqlite3.Error:
        logger.exception("Error updating goal")
        return api_response(500, "Failed to update goal")

    if affected == 0:
        logger.warning(f"Goal {goal_id} not found for update")
        return api_response(404, "Goal not found")

    logger.info(f"Updated goal {goal_id}")
    return api_response(200, "Goal updated successfully")


@bp.route("/<row_id:goal_id>", methods=["DELETE"])
def delete_goal(goal_id):
    try:
        _, affected = db.execute_db("DELETE FROM goals WHERE id = ?", (goal_id,))
    except sqlite3.Error:
        logger.exception(f"Error deleting goal {goal_id}")
        return api_response(500, "Failed to delete goal")

    if affected == 0:
        logger.warning(f"Goal {goal_id} not found for delete")
        return api_response(404, "Goal not found")

    logger.info(f"Goal {goal_id} deleted successfully")
    return api_response(200, "Goal deleted successfully")
