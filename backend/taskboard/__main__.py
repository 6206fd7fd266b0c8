import logging
import sys

from . import create_app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    port = app.config["PORT"]

    app.logger.info("Server running on http://localhost:%s", port)
    try:
        app.run(host=app.config["HOST"], port=port, threaded=True, use_reloader=False)
    except OSError as exc:
        app.logger.critical("Port %s kann nicht gebunden werden: %s", port, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
