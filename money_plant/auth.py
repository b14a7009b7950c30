# money_plant/auth.py
import logging
import sqlite3

from flask import Blueprint
from flask_jwt_extended import create_access_token
from werkzeug.security import check_password_hash, generate_password_hash

from . import db
from .helpers import api_response, missing_fields, request_data, text_field
from .models import User

logger = logging.getLogger("money-plant.auth")

auth_bp = Blueprint("auth", __name__, url_prefix="/money_plant")


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request_data()
    if missing_fields(data, ["email", "password"]):
        return api_response(400, "Missing required fields.")

    email = str(data["email"]).strip().lower()
    try:
        user_id, _ = db.execute_db(
            "INSERT INTO users (name, email, password_hash) VALUES (?, ?, ?)",
            (text_field(data, "name"), email, generate_password_hash(str(data["password"])))
        )
    except sqlite3.IntegrityError:
        logger.warning(f"Registration rejected, email already exists: {email}")
        return api_response(409, "Email already registered")
    except sqlite3.Error:
        logger.exception("Error registering user")
        return api_response(500, "Failed to register user")

    logger.info(f"Registered user {user_id}")
    return api_response(201, "User registered successfully",
                        {"id": user_id, "name": text_field(data, "name"), "email": email})


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request_data()
    if missing_fields(data, ["email", "password"]):
        return api_response(400, "Missing required fields.")

    email = str(data["email"]).strip().lower()
    try:
        row = db.query_db("SELECT * FROM users WHERE email = ?", (email,), one=True)
    except sqlite3.Error:
        logger.exception("Error looking up user for login")
        return api_response(500, "Failed to login")

    if row is None or not check_password_hash(row["password_hash"], str(data["password"])):
        logger.warning(f"Failed login for {email}")
        return api_response(401, "Invalid email or password")

    user = User.from_row(row)
    token = create_access_token(identity=str(user.id))
    logger.info(f"User {user.id} logged in")
    return api_response(200, "Login successful", {"access_token": token, "user": user.to_dict()})
