# money_plant/transactions.py
import logging
import sqlite3

from flask import Blueprint

from . import db
from .helpers import (
    api_response, format_date, missing_fields, parse_amount, parse_date, parse_row_id, request_data, text_field,
)
from .models import SpendingRecord

logger = logging.getLogger("money-plant.transactions")

bp = Blueprint("transactions", __name__, url_prefix="/track-records")

REQUIRED_FIELDS = ["amount", "category", "payment_method"]


def validate_record(data):
    """Check the body of a create/update request.

    Returns (values, error) where values holds the cleaned amount, the
    owner id and, when one was sent, the transaction date in storage format.
    """
    if missing_fields(data, REQUIRED_FIELDS):
        return None, "Missing required fields."

    amount = parse_amount(data.get("amount"))
    if amount is None:
        return None, "Invalid amount format"

    values = {"amount": amount, "user_id": None, "transaction_date": None}
    if data.get("user_id") not in (None, ""):
        values["user_id"] = parse_row_id(data["user_id"])
        if values["user_id"] is None:
            return None, "Invalid user_id"
    if data.get("transaction_date"):
        parsed = parse_date(data["transaction_date"])
        if parsed is None:
            return None, "Invalid transaction_date format"
        values["transaction_date"] = format_date(parsed)
    return values, None


@bp.route("", methods=["GET"])
def list_records():
    try:
        rows = db.query_db("SELECT * FROM MoneySpending ORDER BY transaction_date DESC, id DESC")
    except sqlite3.Error:
        logger.exception("Error fetching track records")
        return api_response(500, "Failed to fetch track records")

    logger.info(f"Fetched {len(rows)} track records")
    return api_response(200, data=[SpendingRecord.from_row(r).to_dict() for r in rows])


@bp.route("/<row_id:record_id>", methods=["GET"])
def get_record(record_id):
    try:
        row = db.query_db("SELECT * FROM MoneySpending WHERE id = ?", (record_id,), one=True)
    except sqlite3.Error:
        logger.exception("Error fetching track record by ID")
        return api_response(500, "Failed to fetch track record")

    if row is None:
        logger.warning(f"Track record {record_id} not found")
        return api_response(404, "Record not found")
    return api_response(200, data=SpendingRecord.from_row(row).to_dict())


@bp.route("/user/<row_id:user_id>", methods=["GET"])
def list_user_records(user_id):
    try:
        rows = db.query_db(
            "SELECT * FROM MoneySpending WHERE user_id = ? ORDER BY transaction_date DESC, id DESC",
            (user_id,)
        )
    except sqlite3.Error:
        logger.exception("Error fetching track records for user")
        return api_response(500, "Failed to fetch track record")

    if not rows:
        logger.warning(f"No track records found for user {user_id}")
        return api_response(404, "Record not found")

    logger.info(f"Fetched {len(rows)} track records for user {user_id}")
    return api_response(200, data=[SpendingRecord.from_row(r).to_dict() for r in rows])


@bp.route("", methods=["POST"])
def add_record():
    data = request_data()
    values, error = validate_record(data)
    if error:
        return api_response(400, error)

    # transaction_date falls back to the column default when not given
    columns = ["amount", "category", "description", "payment_method", "user_id"]
    args = [values["amount"], text_field(data, "category"), text_field(data, "description"),
            text_field(data, "payment_method"), values["user_id"]]
    if values["transaction_date"]:
        columns.append("transaction_date")
        args.append(values["transaction_date"])

    placeholders = ", ".join("?" for _ in columns)
    try:
        record_id, affected = db.execute_db(
            f"INSERT INTO MoneySpending ({', '.join(columns)}) VALUES ({placeholders})",
            tuple(args)
        )
    except sqlite3.Error:
        logger.exception("Error inserting record")
        return api_response(500, "Failed to insert record")

    logger.info(f"Inserted track record - ID: {record_id}")
    return api_response(201, "Record added successfully", {"id": record_id, "affected_rows": affected})


@bp.route("/<row_id:record_id>", methods=["PUT"])
def update_record(record_id):
    data = request_data()
    values, error = validate_record(data)
    if error:
        return api_response(400, error)

    try:
        _, affected = db.execute_db(
            "UPDATE MoneySpending SET amount = ?, category = ?, description = ?, payment_method = ?, "
            "transaction_date = COALESCE(?, transaction_date) WHERE id = ?",
            (values["amount"], text_field(data, "category"), text_field(data, "description"),
             text_field(data, "payment_method"), values["transaction_date"], record_id)
        )
    except sqlite3.Error:
        logger.exception("Error updating record")
        return api_response(500, "Failed to update record")

    if affected == 0:
        logger.warning(f"Track record {record_id} not found for update")
        return api_response(404, "Record not found")

    logger.info(f"Updated track record {record_id}")
    return api_response(200, "Record updated successfully")


@bp.route("/<row_id:record_id>", methods=["DELETE"])
def delete_record(record_id):
    try:
        _, affected = db.execute_db("DELETE FROM MoneySpending WHERE id = ?", (record_id,))
    except sqlite3.Error:
        logger.exception("Error deleting record")
        return api_response(500, "Failed to delete record")

    if affected == 0:
        logger.warning(f"Track record {record_id} not found for delete")
        return api_response(404, "Record not found")

    logger.info(f"Deleted track record {record_id}")
    return api_response(200, "Record deleted successfully")
