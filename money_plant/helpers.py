# money_plant/helpers.py
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from flask import jsonify, request
from werkzeug.routing import IntegerConverter

DATE_FORMATS = ["%Y-%m-%d %H:%M:%S", "%Y-%m-%d", "%d-%m-%Y", "%Y/%m/%d", "%d/%m/%Y"]
STORAGE_FORMAT = "%Y-%m-%d %H:%M:%S"

# largest value sqlite can bind as an INTEGER
SQLITE_MAX_INT = 2 ** 63 - 1
CENTS = Decimal("0.01")


class RowIdConverter(IntegerConverter):
    """Path ids beyond the sqlite INTEGER range do not match, so they 404."""

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault("max", SQLITE_MAX_INT)
        super().__init__(map, *args, **kwargs)


def api_response(status, message=None, data=None):
    """Build the {status, message?, data?} envelope every endpoint returns."""
    body = {"status": status}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def request_data():
    """Body as a dict, from JSON or a urlencoded form"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def missing_fields(data, fields):
    # empty strings, zero and null all count as missing
    return [f for f in fields if not data.get(f)]


def parse_amount(value):
    """Return the amount rounded to cents as a float, or None when it is not a number."""
    if isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (TypeError, ValueError, InvalidOperation):
        return None
    if not amount.is_finite():
        return None
    try:
        return float(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # too many digits to hold in cents
        return None


def parse_row_id(value):
    """Integer id that fits a sqlite INTEGER column, or None."""
    if isinstance(value, bool):
        return None
    try:
        row_id = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return row_id if -SQLITE_MAX_INT - 1 <= row_id <= SQLITE_MAX_INT else None


def parse_date(s):
    """Try multiple date formats"""
    if not s:
        return None
    s = str(s).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def format_date(dt):
    return dt.strftime(STORAGE_FORMAT)


def text_field(data, key):
    """Field as text, or None; numbers sent for a text column are stored as their string form."""
    value = data.get(key)
    return None if value is None else str(value)
