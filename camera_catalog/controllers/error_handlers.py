from flask import current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

ERROR_STATUS = {
    'not_found': 404,
    'invalid_image': 400,
    'upload_failed': 502,
    'unavailable': 503,
    'storage_error': 500,
}


def failure_status(result):
    return ERROR_STATUS.get(result.get('error'), 500)


def _log_failure(result, status):
    log = current_app.logger.error if status >= 500 else current_app.logger.warning
    log("%s %s failed with %s: %s", request.method, request.path, status, result['message'])


def render_failure(result):
    """Turn a failed service result into the shared error page."""
    status = failure_status(result)
    _log_failure(result, status)
    return render_template('errors/error.html', status=status, response=result['message']), status


def json_failure(result):
    status = failure_status(result)
    _log_failure(result, status)
    return jsonify({
        'success': False,
        'message': result['message']
    }), status


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': e.description}), e.code
        return render_template('errors/error.html', status=e.code, response=e.description), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = 'Something went wrong.'
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': message}), 500
        return render_template('errors/error.html', status=500, response=message), 500
