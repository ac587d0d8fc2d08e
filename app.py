"""
Groupie Tracker Web Application
Server-rendered artist listing and detail pages backed by the Groupie Trackers API
"""
import argparse

from flask import Flask
from werkzeug.exceptions import HTTPException

from api.errors import FrontendError, MethodError, NotFoundError
from api.routes.artist_routes import create_artists_blueprint
from api.routes.main_routes import create_main_blueprint
from api.services.artist_service import ArtistService
from api.services.render_service import PageRenderer
from config import load_config
from utils.logger import configure_logging, logger


def _from_http_exception(e):
    """Map routing errors raised by Flask onto our own error types"""
    if e.code == 404:
        return NotFoundError("Page Not Found")
    if e.code == 405:
        return MethodError("Method Not Allowed")
    error = FrontendError(e.description or e.name)
    error.code = e.code or 500
    return error


def create_app(config=None):
    """Application factory pattern"""
    settings = load_config()
    if config:
        settings.update(config)

    configure_logging(settings['LOG_LEVEL'])

    app = Flask(__name__, static_folder='static', static_url_path='/static')
    app.config['GROUPIE'] = settings

    artist_service = ArtistService(settings['API_BASE_URL'],
                                   query_limit=settings['QUERY_MAX_LENGTH'])
    renderer = PageRenderer(app.jinja_env)

    # Register blueprints
    app.register_blueprint(create_main_blueprint(artist_service, renderer))
    app.register_blueprint(create_artists_blueprint(artist_service, renderer))

    @app.errorhandler(FrontendError)
    def handle_frontend_error(e):
        if e.code >= 500:
            logger(f"{e.code} {e.message}", "ERROR")
        return renderer.render_error(e.code, e.message)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return handle_frontend_error(_from_http_exception(e))

    return app


def main(argv=None):
    settings = load_config()
    parser = argparse.ArgumentParser(
        description='Serve the Groupie Tracker artist pages.')
    parser.add_argument(
        '--host',
        default=settings['HOST'],
        help='Interface to bind. Defaults to $HOST or "0.0.0.0".'
    )
    parser.add_argument(
        '--port', '-p',
        type=int,
        default=settings['PORT'],
        help='Port to listen on. Defaults to $PORT or 8080.'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=settings['DEBUG'],
        help='Run Flask in debug mode.',
    )
    parser.add_argument(
        '--log-level',
        default=settings['LOG_LEVEL'],
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        type=str.upper,
        help='Minimum severity to log. Defaults to $LOG_LEVEL or INFO.'
    )
    args = parser.parse_args(argv)

    if not 0 < args.port < 65536:
        parser.error('--port must be between 1 and 65535.')

    app = create_app({
        'HOST': args.host,
        'PORT': args.port,
        'DEBUG': args.debug,
        'LOG_LEVEL': args.log_level,
    })

    logger(f"Server running on http://localhost:{args.port}", "INFO")
    logger("Press Ctrl+C to stop the server", "INFO")
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == '__main__':
    main()
