from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from threadboard.errors import PaginationValidationError
from threadboard.identity import current_user_id
from threadboard.schemas.comment_schema import (
    CommentConnectionSchema,
    CommentResponseSchema,
)
from threadboard.services import comment_service


comment_bp = Blueprint("comments", __name__)


def _int_arg(name):
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise PaginationValidationError(f"'{name}' must be an integer")


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Invalid JSON body")
    return data


@comment_bp.route("/posts/<int:post_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    data = _json_body()

    comment = comment_service.add_comment(
        author_id=current_user_id(),
        post_id=post_id,
        body=data.get("body"),
        parent_id=data.get("parent_id")
    )
    return CommentResponseSchema().dump(comment), 201


@comment_bp.route("/posts/<int:post_id>/comments", methods=["GET"])
def list_comments(post_id):
    connection = comment_service.fetch_comment_page(
        post_id,
        first=_int_arg("first"),
        last=_int_arg("last"),
        after=request.args.get("after"),
        before=request.args.get("before"),
    )
    return CommentConnectionSchema().dump(connection), 200


@comment_bp.route("/comments/<int:comment_id>", methods=["GET"])
def get_comment(comment_id):
    comment = comment_service.get_comment(comment_id)
    return CommentResponseSchema().dump(comment), 200


@comment_bp.route("/comments/<int:comment_id>", methods=["PATCH"])
@jwt_required()
def update_comment(comment_id):
    data = _json_body()

    comment = comment_service.edit_comment(
        current_user_id(),
        comment_id,
        data.get("body")
    )
    return CommentResponseSchema().dump(comment), 200


@comment_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@jwt_required()
def delete_comment(comment_id):
    comment_service.remove_comment(current_user_id(), comment_id)
    return jsonify({"message": "Comment deleted"}), 200
