# money_plant/models.py
# lightweight model classes (not DB-bound ORM)


def _as_float(value):
    return float(value) if value is not None else None


class ContactMessage:
    def __init__(self, id, name, email_id, message, created_at=None):
        self.id = id
        self.name = name
        self.email_id = email_id
        self.message = message
        self.created_at = created_at

    @classmethod
    def from_row(cls, row):
        return cls(row['id'], row['name'], row['email_id'], row['message'], row['created_at'])

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email_id': self.email_id,
            'message': self.message,
            'created_at': self.created_at,
        }


class SpendingRecord:
    def __init__(self, id, amount, category, description=None, payment_method=None,
                 user_id=None, transaction_date=None):
        self.id = id
        self.amount = amount
        self.category = category
        self.description = description
        self.payment_method = payment_method
        self.user_id = user_id
        self.transaction_date = transaction_date

    @classmethod
    def from_row(cls, row):
        return cls(
            row['id'], row['amount'], row['category'], row['description'],
            row['payment_method'], row['user_id'], row['transaction_date'],
        )

    def to_dict(self):
        return {
            'id': self.id,
            'amount': _as_float(self.amount),
            'category': self.category,
            'description': self.description,
            'payment_method': self.payment_method,
            'user_id': self.user_id,
            'transaction_date': self.transaction_date,
        }


class Goal:
    def __init__(self, id, goal_amount, created_by, created_date=None):
        self.id = id
        self.goal_amount = goal_amount
        self.created_by = created_by
        self.created_date = created_date

    @classmethod
    def from_row(cls, row):
        return cls(row['id'], row['goal_amount'], row['created_by'], row['created_date'])

    def to_dict(self):
        return {
            'id': self.id,
            'goal_amount': _as_float(self.goal_amount),
            'created_by': self.created_by,
            'created_date': self.created_date,
        }


class User:
    def __init__(self, id, email, password_hash, name=None, created_at=None):
        self.id = id
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.created_at = created_at

    @classmethod
    def from_row(cls, row):
        return cls(row['id'], row['email'], row['password_hash'], row['name'], row['created_at'])

    def to_dict(self):
        # never expose the password hash
        return {'id': self.id, 'name': self.name, 'email': self.email}
