from flask import Blueprint, redirect, render_template, request, session, url_for
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from camera_catalog.services.auth_service import AuthService

auth_bp = Blueprint('auth', __name__)


def _safe_return_path(path):
    # Only same-site relative paths, never an open redirect
    if path and path.startswith('/') and not path.startswith('//'):
        return path
    return url_for('cameras.list_cameras')


@auth_bp.route('/login', methods=['GET'])
def login():
    """Send the browser to Google, remembering where to come back to."""
    url, state = AuthService.authorization_url()
    session['oauth2_state'] = state
    session['oauth2_return'] = _safe_return_path(request.args.get('return'))
    return redirect(url)


@auth_bp.route('/google/callback', methods=['GET'])
def callback():
    state = session.pop('oauth2_state', None)
    return_to = session.pop('oauth2_return', None) or url_for('cameras.list_cameras')

    if 'error' in request.args:
        return render_template('errors/error.html', status=401,
                               response=f"Login cancelled: {request.args['error']}"), 401

    code = request.args.get('code')
    if not code or not state or request.args.get('state') != state:
        return render_template('errors/error.html', status=400,
                               response='Invalid login state, please try again.'), 400

    result = AuthService.login(code)
    if not result['success']:
        return render_template('errors/error.html', status=401, response=result['message']), 401

    response = redirect(return_to)
    set_access_cookies(response, result['token'])
    return response


@auth_bp.route('/logout', methods=['GET'])
def logout():
    response = redirect('/')
    unset_jwt_cookies(response)
    return response
