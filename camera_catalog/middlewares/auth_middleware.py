from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import abort, current_app, redirect, request, url_for
from flask_jwt_extended import get_jwt, unset_jwt_cookies, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


@dataclass(frozen=True)
class Identity:
    id: str
    display_name: str
    image_url: Optional[str] = None


def current_identity() -> Optional[Identity]:
    """Return the logged in user, or None for anonymous requests."""
    if not current_app.config['AUTH_ENABLED']:
        return None
    verify_jwt_in_request(optional=True)
    claims = get_jwt()
    if not claims:
        return None
    return Identity(
        id=claims['sub'],
        display_name=claims.get('displayName', ''),
        image_url=claims.get('image'),
    )


def login_url(return_to=None):
    if not current_app.config['AUTH_ENABLED']:
        return None
    return url_for('auth.login', **{'return': return_to or request.full_path.rstrip('?')})


def identity_optional(fn):
    """Pass the current identity (or None) to the view as ``identity``."""
    @wraps(fn)
    def decorator(*args, **kwargs):
        return fn(*args, identity=current_identity(), **kwargs)
    return decorator


def identity_required(fn):
    """Like identity_optional, but anonymous users are sent to the login page."""
    @wraps(fn)
    def decorator(*args, **kwargs):
        if not current_app.config['AUTH_ENABLED']:
            abort(404)
        identity = current_identity()
        if identity is None:
            return redirect(login_url())
        return fn(*args, identity=identity, **kwargs)
    return decorator


def _back_to_login(reason):
    current_app.logger.info("Discarding session token: %s", reason)
    response = redirect(login_url())
    unset_jwt_cookies(response)
    return response


def init_auth(app, jwt):
    """Wire token error handling and the template helpers onto ``app``."""

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _back_to_login('expired')

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _back_to_login(reason)

    @jwt.unauthorized_loader
    def unauthorized(reason):
        return _back_to_login(reason)

    @app.context_processor
    def auth_template_context():
        # Display only; views that act on identity get it from their own gate
        try:
            identity = current_identity()
        except (JWTExtendedException, PyJWTError):
            identity = None
        csrf_cookie = current_app.config.get('JWT_ACCESS_CSRF_COOKIE_NAME', 'csrf_access_token')
        return {
            'auth_enabled': current_app.config['AUTH_ENABLED'],
            'profile': identity,
            'login_url': login_url() if identity is None else None,
            'logout_url': url_for('auth.logout') if identity is not None else None,
            'csrf_token': request.cookies.get(csrf_cookie, ''),
        }
