"""User endpoints."""

from flask import Blueprint

from blogful import services
from blogful.extensions import db
from blogful.schemas import UserSchema


users_bp = Blueprint("users", __name__, url_prefix="/users")


@users_bp.route("", methods=["GET"])
def list_users():
    """List all users with sanitized text fields."""
    users = services.get_all_users(db.session)
    return UserSchema(many=True).jsonify(users)
