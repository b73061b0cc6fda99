import os

from flask import Flask, Response, request
from werkzeug.exceptions import MethodNotAllowed

from gemini_relay import RelayHandler, RelayRequest, Settings

# Every method reaches the relay so it can answer 405 with CORS headers itself
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(settings=None, relay=None):
    # GEMINI_API_KEY comes from the host's secrets / environment variables
    settings = settings or Settings.from_env()
    relay = relay or RelayHandler(settings)

    app = Flask(__name__)
    app.config["RELAY"] = relay

    def respond():
        result = relay.handle(RelayRequest(
            method=request.method,
            headers=request.headers,
            body=request.get_data(),
        ))
        return Response(result.body, status=result.status, headers=result.headers)

    @app.route("/", defaults={"path": ""}, methods=RELAY_METHODS)
    @app.route("/<path:path>", methods=RELAY_METHODS)
    def chat(path):
        return respond()

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(error):
        return respond()

    return app


app = create_app()

if __name__ == "__main__":
    app.run(port=int(os.environ.get("PORT", "5000")), debug=True)
