import logging
from flask import Flask, Response, request, abort

from value_api.config import Config, build_store
from value_api.store import StoreError, parse_value

log = logging.getLogger(__name__)

def create_app(store):
    app = Flask(__name__)

    @app.before_request
    def only_get_and_post():
        # HEAD matches the GET rule in werkzeug routing; refuse it like any other method
        if request.url_rule is not None and request.method not in ("GET", "POST"):
            abort(405)

    @app.route("/value", methods=["GET"], provide_automatic_options=False)
    def get_value():
        try:
            value = store.get()
        except StoreError as e:
            log.error("get failed: %s", e)
            return Response(status=500)
        return Response(str(value), mimetype="text/plain")

    @app.route("/value", methods=["POST"], provide_automatic_options=False)
    def set_value():
        # read failures surface as werkzeug BadRequest (400)
        body = request.get_data(cache=False)
        if (value := parse_value(body)) is None:
            abort(400)
        try:
            store.set(value)
        except StoreError as e:
            log.error("set failed: %s", e)
            return Response(status=500)
        return Response(status=200)

    return app

def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s| %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("werkzeug").setLevel(logging.ERROR)
    config = Config.from_env()
    app = create_app(build_store(config))
    log.info("ready to listen")
    app.run(host="0.0.0.0", port=config.port, threaded=True)

if __name__ == "__main__":
    main()
