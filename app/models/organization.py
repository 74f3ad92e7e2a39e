"""
Organization model: ``organizations`` table.

The web UI only reads this table.  Rows are created outside the
application (or by ``flask seed-dev-organizations`` locally); the model
exists so the schema can be created, migrated, and seeded.
"""

from app.extensions import db


class Organization(db.Model):
    """
    A customer organization shown in the directory.

    ``subscription_tier`` values are managed by the billing system and
    are displayed verbatim.
    """

    __tablename__ = "organizations"

    organization_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    organization_name = db.Column(db.String(200), nullable=False, index=True)
    industry = db.Column(db.String(100), nullable=True)
    address = db.Column(db.String(300), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    subscription_tier = db.Column(db.String(50), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )

    def __repr__(self) -> str:
        return f"<Organization {self.organization_id}: {self.organization_name}>"
