from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from threadboard.identity import current_user_id
from threadboard.schemas.post_schema import PostResponseSchema
from threadboard.services import post_service

post_bp = Blueprint("posts", __name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Invalid JSON body")
    return data


@post_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post():
    data = _json_body()

    post = post_service.create_post(
        current_user_id(),
        data.get("title"),
        data.get("body"),
        data.get("allow_comments", True)
    )
    return PostResponseSchema().dump(post), 201


@post_bp.route("/posts/<int:post_id>", methods=["GET"])
def get_post(post_id):
    post = post_service.get_post(post_id)
    return PostResponseSchema().dump(post), 200


@post_bp.route("/users/<int:user_id>/posts", methods=["GET"])
def list_user_posts(user_id):
    posts = post_service.get_posts_by_author(user_id)
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@post_bp.route("/posts/<int:post_id>", methods=["PATCH"])
@jwt_required()
def update_post(post_id):
    data = _json_body()

    post = post_service.update_post(
        current_user_id(),
        post_id,
        title=data.get("title"),
        body=data.get("body"),
        allow_comments=data.get("allow_comments")
    )
    return PostResponseSchema().dump(post), 200


@post_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    post_service.delete_post(current_user_id(), post_id)
    return jsonify({"message": "Post deleted"}), 200
