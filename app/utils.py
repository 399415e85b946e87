from flask import Response, current_app
from werkzeug.exceptions import HTTPException


def plain_error(message, status):
    """Plain text error body, the same shape for every failure"""
    return Response(f"{message}\n", status=status, mimetype='text/plain')


def handle_http_error(err: HTTPException):
    # covers routing failures raised by werkzeug (404, 405, ...)
    response = plain_error(err.description or err.name, err.code)
    valid_methods = getattr(err, 'valid_methods', None)
    if valid_methods:
        response.headers['Allow'] = ', '.join(valid_methods)
    return response


def get_store():
    return current_app.extensions['motd_store']
