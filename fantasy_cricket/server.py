"""HTTP interface for the fantasy cricket scorer."""

import json
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlparse

from .errors import ValidationError
from .logging_config import ACCESS_LOGGER, get_logger
from .service import FantasyService

logger = get_logger('server')
access_logger = get_logger(ACCESS_LOGGER)


def make_handler(service: FantasyService) -> type[BaseHTTPRequestHandler]:
    """Build a request handler class bound to a service instance."""

    class handler(BaseHTTPRequestHandler):  # noqa: N801
        def do_OPTIONS(self):
            """Handle CORS preflight."""
            self.send_response(200)
            self._send_cors_headers()
            self.send_header('Access-Control-Max-Age', '86400')
            self.send_header('Content-Length', '0')
            self.end_headers()

        def do_GET(self):
            path = urlparse(self.path).path
            try:
                if path == '/team-result':
                    return self._send_json(200, {'winner': service.team_result()})

                if path == '/teams':
                    standings = [
                        {'rank': e.rank, 'teamName': e.team_name, 'points': e.points}
                        for e in service.standings()
                    ]
                    return self._send_json(200, {'teams': standings})

                return self._send_json(404, {'error': 'Not found'})

            except Exception:
                logger.exception(f'Error handling GET {path}')
                return self._send_json(500, {'error': 'Internal server error'})

        def do_POST(self):
            path = urlparse(self.path).path
            try:
                if path == '/add-team':
                    data = self._read_json()
                    if not isinstance(data, dict):
                        return self._send_json(400, {
                            'error': 'Invalid team payload',
                            'details': ['body must be a JSON object'],
                        })
                    service.add_team(data)
                    return self._send_json(200, {'message': 'Team entry added successfully!'})

                if path == '/process-result':
                    result = service.process_result(self._read_json())
                    return self._send_json(200, {
                        'message': 'Match result processed successfully!',
                        'playersScored': result.players_scored,
                        'teamsUpdated': result.teams_updated,
                    })

                return self._send_json(404, {'error': 'Not found'})

            except (json.JSONDecodeError, UnicodeDecodeError):
                return self._send_json(400, {'error': 'Invalid JSON'})
            except ValidationError as e:
                logger.info(f'Rejected POST {path}: {e.message} {e.details}')
                return self._send_json(400, {'error': e.message, 'details': e.details})
            except Exception:
                logger.exception(f'Error handling POST {path}')
                return self._send_json(500, {'error': 'Internal server error'})

        def _read_json(self):
            """Parse the request body, or return None when there is none."""
            try:
                content_length = int(self.headers.get('Content-Length', 0))
            except ValueError:
                raise ValidationError('Invalid Content-Length header') from None
            body = self.rfile.read(content_length) if content_length > 0 else b''
            return json.loads(body) if body.strip() else None

        def _send_cors_headers(self):
            self.send_header('Access-Control-Allow-Origin', '*')
            self.send_header('Access-Control-Allow-Methods', 'GET, POST, OPTIONS')
            self.send_header('Access-Control-Allow-Headers', 'Content-Type, Authorization')

        def _send_json(self, status_code: int, data: dict):
            """Send JSON response with CORS headers."""
            body = json.dumps(data).encode()
            self.send_response(status_code)
            self.send_header('Content-Type', 'application/json')
            self.send_header('Content-Length', str(len(body)))
            self._send_cors_headers()
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            access_logger.info(f'{self.address_string()} - {format % args}')

    return handler


def create_server(service: FantasyService, host: str, port: int) -> ThreadingHTTPServer:
    """Create (but do not start) an HTTP server for the service."""
    return ThreadingHTTPServer((host, port), make_handler(service))


def run_server(service: FantasyService, host: str, port: int) -> None:
    """Serve requests until interrupted."""
    server = create_server(service, host, port)
    logger.info(f'App listening on http://{host}:{server.server_port}')
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info('Shutting down')
    finally:
        server.server_close()
