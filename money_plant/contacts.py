# money_plant/contacts.py
import logging
import sqlite3

from flask import Blueprint

from . import db
from .helpers import api_response, request_data, text_field
from .models import ContactMessage

logger = logging.getLogger("money-plant.contacts")

bp = Blueprint("contacts", __name__)


@bp.route("/contact", methods=["POST"])
def add_contact():
    data = request_data()
    try:
        contact_id, _ = db.execute_db(
            "INSERT INTO ContactUs (name, email_id, message) VALUES (?, ?, ?)",
            (text_field(data, "name"), text_field(data, "email"), text_field(data, "message"))
        )
    except sqlite3.Error:
        logger.exception("Error inserting into ContactUs table")
        return api_response(500, "Failed to insert into ContactUs table")

    logger.info(f"Inserted into ContactUs table - ID: {contact_id}")
    return api_response(200, "Contact details inserted successfully")


@bp.route("/contacts", methods=["GET"])
def list_contacts():
    try:
        rows = db.query_db("SELECT * FROM ContactUs ORDER BY id")
    except sqlite3.Error:
        logger.exception("Error fetching from ContactUs table")
        return api_response(500, "Failed to fetch from ContactUs table")

    logger.info(f"Fetched {len(rows)} rows from ContactUs table")
    return api_response(200, data=[ContactMessage.from_row(r).to_dict() for r in rows])
