"""
Flask REST API and page for the VYRA stylist

Endpoints:
    GET  /                        - Bilingual form page (?lang=en|ar)
    GET  /api/health-check        - Health check
    GET  /api/labels/<lang>       - Label table for a language
    POST /api/generate-outfits    - Generate three outfit suggestions
"""

from functools import partial

from flask import Flask, request, jsonify, render_template_string
from flask_cors import CORS

from Stylist.AI.ai_client import AIClient
from Stylist.Events.event_dispatcher import EventDispatcher, register_logging_listeners
from Stylist.Utility.env import load_env_file, get_ai_settings
from Stylist.Utility.labels import get_labels
from Stylist.Exception.StylistError import (
    ExtractionError,
    SchemaMismatchError,
    TransportError,
    ValidationError,
)
from Stylist.Business.StyleBusiness import StyleBusiness
from Stylist.Model.StylePreferences import PREFERENCE_FIELDS
from Stylist.Model.StylistSession import StylistSession
from Stylist.Routes.page import PAGE_TEMPLATE
from Stylist.Routes.validators import validate_generate_payload, map_suggestions

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional configuration dictionary
        business: Optional StyleBusiness (tests inject one with a fake client)
    Returns:
        Flask application instance
    Raises:
        ValueError: when a numeric STYLIST_AI_* setting does not parse
"""
def CreateApp(config=None, business: StyleBusiness = None):

    app = Flask(__name__)
    if config:
        app.config.update(config)
    load_env_file()
    settings = get_ai_settings()
    if business is None:
        business = StyleBusiness(client_factory=partial(AIClient, settings=settings), dispatcher=EventDispatcher())
    register_logging_listeners(business.dispatcher)
    CORS(app)
    RegisterRoutes(app, business)
    return app

"""Register all routes.
    Args:
        app: Flask application instance
        business: orchestrator used by the generate endpoint
"""
def RegisterRoutes(app: Flask, business: StyleBusiness) -> None:

    @app.route("/")
    def Index():
        context = get_labels(request.args.get("lang", "en"))
        defaults = {field: default for field, (_, default) in PREFERENCE_FIELDS.items()}
        return render_template_string(PAGE_TEMPLATE, defaults=defaults, **context)

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "VYRA stylist API is running"
        }), 200

    @app.route('/api/labels/<lang>', methods=['GET'])
    def Labels(lang):
        return jsonify(get_labels(lang)), 200

    """Generate outfit suggestions.
        Request JSON body:
        {
            "api_key": "sk-...",      # Required, at least 10 characters after trimming
            "gender": "female",       # Optional, female|male|unisex
            "occasion": "casual",     # Optional, casual|work|wedding|party
            "style": "modern",        # Optional, modern|vintage|street|elegant
            "budget": "medium"        # Optional, low|medium|high
        }
        Returns:
            JSON response with suggestions or error
    """
    @app.route('/api/generate-outfits', methods=['POST'])
    def GenerateOutfitsEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            try:
                api_key, preferences = validate_generate_payload(data)
            except ValueError as e:
                return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

            session = StylistSession(api_key=api_key, preferences=preferences)
            logger.info("Generating outfits for %s", preferences)
            batch = business.GenerateOutfits(session)

            return jsonify({
                "success": True,
                "preferences": preferences.to_dict(),
                "suggestions": map_suggestions(batch),
            }), 200

        except ValidationError as e:
            return jsonify({"error": "invalid_parameter", "message": e.message}), 400

        except TransportError as e:
            logger.error("AI service error: %s", e.message)
            return jsonify({
                "error": "upstream_error",
                "message": e.message,
                "upstream_status": e.upstream_status,
                "upstream_body": e.body,
            }), 502

        except SchemaMismatchError as e:
            logger.error("AI response did not match the suggestion schema: %s", e.message)
            return jsonify({"error": "schema_mismatch", "message": e.message}), 422

        except ExtractionError as e:
            logger.error("AI response not understood: %s", e.message)
            return jsonify({"error": "response_not_understood", "message": e.message}), 422

        except Exception as e:
            logger.exception(f"Error generating outfits: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/generate-outfits"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
