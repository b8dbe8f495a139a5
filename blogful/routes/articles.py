"""Article CRUD endpoints."""

import logging

from flask import Blueprint, request
from marshmallow import ValidationError

from blogful import services
from blogful.errors import error_response
from blogful.extensions import db
from blogful.schemas import ArticleCreateSchema, ArticleSchema
from blogful.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

articles_created = meter.create_counter(
    name="articles.created",
    description="Articles created",
    unit="1",
)

articles_deleted = meter.create_counter(
    name="articles.deleted",
    description="Articles deleted",
    unit="1",
)

articles_bp = Blueprint("articles", __name__, url_prefix="/articles")

ARTICLE_NOT_FOUND = "Article doesn't exist"

# Ids are generated into a 32-bit INTEGER column
MAX_ARTICLE_ID = 2**31 - 1


def _parse_article_id(raw: str) -> int | None:
    """Return the id in a URL segment, or None if no article can have it."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    article_id = int(raw)
    if not 1 <= article_id <= MAX_ARTICLE_ID:
        return None
    return article_id


@articles_bp.route("", methods=["GET"], strict_slashes=False)
def list_articles():
    """List all articles.

    Returns:
        JSON array of serialized articles.
    """
    articles = services.get_all_articles(db.session)
    return ArticleSchema(many=True).jsonify(articles)


@articles_bp.route("", methods=["POST"], strict_slashes=False)
def create_article():
    """Create a new article.

    Returns:
        JSON response with the created article and a Location header.
    """
    with tracer.start_as_current_span("article.create") as span:
        # Validate request data
        schema = ArticleCreateSchema()
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        try:
            data = schema.load(payload)
        except ValidationError as err:
            message = ArticleCreateSchema.first_error(err.messages)
            span.set_attribute("validation.error", message)
            return error_response(message, 400)

        article = services.insert_article(db.session, data)

        span.set_attribute("article.id", article.id)
        span.set_attribute("article.style", article.style)

        articles_created.add(1, {"style": article.style})
        logger.info(f"Article created: {article.id}")

        response = ArticleSchema().jsonify(article)
        response.status_code = 201
        response.headers["Location"] = f"/articles/{article.id}"
        return response


@articles_bp.route("/<article_id>", methods=["GET"], strict_slashes=False)
def get_article(article_id: str):
    """Get a single article by id.

    Args:
        article_id: Article id.

    Returns:
        JSON response with article data.
    """
    parsed_id = _parse_article_id(article_id)
    article = services.get_by_id(db.session, parsed_id) if parsed_id is not None else None
    if article is None:
        return error_response(ARTICLE_NOT_FOUND, 404)

    return ArticleSchema().jsonify(article)


@articles_bp.route("/<article_id>", methods=["DELETE"], strict_slashes=False)
def delete_article(article_id: str):
    """Delete an article.

    Args:
        article_id: Article id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("article.delete") as span:
        span.set_attribute("article.id", article_id)

        parsed_id = _parse_article_id(article_id)
        if parsed_id is None or not services.delete_article(db.session, parsed_id):
            return error_response(ARTICLE_NOT_FOUND, 404)

        articles_deleted.add(1)
        logger.info(f"Article deleted: {article_id}")

        return "", 204
