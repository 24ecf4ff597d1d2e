"""
Error pages shared by every blueprint
"""
from flask import Blueprint, render_template, render_template_string, request
from jinja2 import TemplateError, TemplateNotFound, TemplateSyntaxError
from utils.logger import logger

errors_bp = Blueprint('errors', __name__)

PAGE_UNAVAILABLE = "The Page you're trying to access is unavailable"

FALLBACK_ERROR_TEMPLATE = """
<html><body>
<h1>Error {{ code }}</h1>
<p>{{ message }}</p>
</body></html>
"""


def render_error(status, message, headers=None):
    """Render the error page, falling back to an inline template when error.html is unusable"""
    severity = 'ERROR' if status >= 500 else 'WARNING'
    logger(f"{status} {request.method} {request.path}: {message}", severity)
    try:
        body = render_template('error.html', code=status, message=message)
    except TemplateError as e:
        logger(f"Error rendering error template: {e}", "WARNING")
        body = render_template_string(FALLBACK_ERROR_TEMPLATE, code=status, message=message)
    return body, status, headers or {}


def render_page(template_name, **context):
    """Render a page template, turning template failures into a 500 page"""
    try:
        return render_template(template_name, **context)
    except (TemplateNotFound, TemplateSyntaxError) as e:
        logger(f"Error loading template {template_name}: {e}", "ERROR")
        return render_error(500, "Error loading template")
    except TemplateError as e:
        logger(f"Error executing template {template_name}: {e}", "ERROR")
        return render_error(500, "Error executing template")


@errors_bp.app_errorhandler(404)
def page_not_found(error):
    return render_error(404, PAGE_UNAVAILABLE)


@errors_bp.app_errorhandler(405)
def method_not_allowed(error):
    return render_error(405, "Wrong method", {'Allow': ', '.join(error.valid_methods or [])})


@errors_bp.app_errorhandler(500)
def internal_error(error):
    original = getattr(error, 'original_exception', None)
    if original is not None:
        logger(f"Unhandled exception: {original!r}", "CRITICAL")
    return render_error(500, "Internal server error")
