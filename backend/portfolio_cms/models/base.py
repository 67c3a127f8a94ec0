from portfolio_cms.extensions import db


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # Human name used in API error messages
    LABEL = "Entry"

    # Columns a full-row replace writes, in declaration order.
    # Subclasses list them; id is never writable.
    WRITABLE_FIELDS = ()

    # Columns stored as JSON and their empty value
    JSON_FIELDS = {}

    def assign(self, data):
        """
        Full-row replace: every writable column takes the value from
        ``data``, missing keys become NULL (or the empty JSON value).
        """
        for field in self.WRITABLE_FIELDS:
            value = data.get(field)
            if value is None and field in self.JSON_FIELDS:
                value = self.JSON_FIELDS[field]()
            setattr(self, field, value)
