from flask import Flask
from strawberry.flask.views import GraphQLView

from threadboard.config import Config
from threadboard.db import db
from threadboard.extensions.extensions import jwt, ma


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    jwt.init_app(app)
    ma.init_app(app)

    # models must be imported before create_all
    from threadboard.models import comment_model, post_model, user_model  # noqa: F401
    from threadboard.graphql.schema import schema
    from threadboard.routes.comment_routes import comment_bp
    from threadboard.routes.errors import register_error_handlers
    from threadboard.routes.post_routes import post_bp

    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    register_error_handlers(app)

    app.add_url_rule(
        "/graphql",
        view_func=GraphQLView.as_view(
            "graphql_view",
            schema=schema,
            graphql_ide="graphiql" if app.config["GRAPHIQL_ENABLED"] else None,
        ),
    )

    with app.app_context():
        db.create_all()

    app.logger.debug("Registered blueprints: %s", ", ".join(app.blueprints))
    return app
