"""
Render service module for turning view-models into HTML responses
"""
from flask import Response

from utils.logger import logger
from ..errors import RenderError
from ..models import ErrorData

ERROR_TITLES = {
    400: "400 — Bad Request",
    404: "404 — Not Found",
    405: "405 — Method Not Allowed",
    500: "500 — Internal Server Error",
}


def join(items, separator=', '):
    """Template helper: render an ordered list of strings as delimited text"""
    if not items:
        return ''
    return separator.join(str(item) for item in items)


def error_title(code):
    return ERROR_TITLES.get(code, f"Error {code}")


class PageRenderer:
    """Renders the index, artist and error templates from one Jinja environment"""

    def __init__(self, environment, error_template='error.html'):
        self.environment = environment
        self.error_template = error_template
        environment.globals['join'] = join
        environment.filters['join'] = join

    def render(self, template_name, status=200, failure_message="Failed to render template", **context):
        """Render a template fully and wrap it in a response with the given status"""
        try:
            body = self.environment.get_template(template_name).render(**context)
        except Exception as e:
            logger(f"Error rendering {template_name}: {e}", "ERROR")
            raise RenderError(failure_message) from e
        return Response(body, status=status, mimetype='text/html')

    def render_error(self, code, message):
        """Render the error page, or plain text if the error template itself fails"""
        data = ErrorData(code=code, title=error_title(code), message=message)
        try:
            body = self.environment.get_template(self.error_template).render(error=data)
        except Exception as e:
            logger(f"Error rendering {self.error_template}: {e}", "ERROR")
            return Response(message, status=code, mimetype='text/plain')
        return Response(body, status=code, mimetype='text/html')
