import logging
import os

from flask import Flask, jsonify, Response
from flask_smorest import Api
from flask_cors import CORS
from sungka.api.routes import bp, bot_bp
from sungka.io import registry

log = logging.getLogger(__name__)

SWAGGER_CSS = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui.css"
SWAGGER_BUNDLE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-bundle.js"
SWAGGER_STANDALONE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-standalone-preset.js"

DEFAULT_ORIGINS = [
    "http://localhost:5173",   # dev UI
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

def _cors_origins():
    raw = os.getenv("SUNGKA_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or DEFAULT_ORIGINS

def _log_level(default="INFO"):
    raw = os.getenv("SUNGKA_LOG_LEVEL", default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        log.warning("SUNGKA_LOG_LEVEL=%r is not a logging level, using %s", raw, default)
        return default
    return raw

def create_app(config=None):
    app = Flask(__name__)

    # smorest OpenAPI basics (still useful for schema generation)
    app.config["API_TITLE"] = "Sungka Bot (Flask)"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.3"
    app.config["HARD_DEPTH"] = registry.HARD_DEPTH
    if config:
        app.config.update(config)

    logging.getLogger("sungka").setLevel(_log_level())

    api = Api(app)
    api.register_blueprint(bp)       # /api/*
    api.register_blueprint(bot_bp)   # /sungka-bot

    origins = _cors_origins()
    CORS(app, resources={r"/api/*": {"origins": origins},
                         r"/sungka-bot": {"origins": origins}})
    log.info("Sungka bot ready (hard depth %d, origins %s)", app.config["HARD_DEPTH"], origins)

    # --- Manual docs: /openapi.json + /apidocs --------------------------------
    @app.get("/openapi.json")
    def openapi_json():
        return jsonify(api.spec.to_dict())

    @app.get("/apidocs")
    def apidocs():
        html = f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>Sungka API Docs</title>
    <link rel="stylesheet" href="{SWAGGER_CSS}">
    <style>body {{ margin:0; background:#fafafa; }}</style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_BUNDLE}"></script>
    <script src="{SWAGGER_STANDALONE}"></script>
    <script>
      window.onload = () => {{
        SwaggerUIBundle({{
          url: "/openapi.json",
          dom_id: "#swagger-ui",
          presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
          layout: "StandaloneLayout"
        }});
      }};
    </script>
  </body>
</html>"""
        return Response(html, mimetype="text/html")
    # --------------------------------------------------------------------------

    return app

if __name__ == "__main__":
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(host="0.0.0.0", port=3000, debug=True)
