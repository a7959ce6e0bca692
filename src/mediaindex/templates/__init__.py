"""Markup template loader for mediaindex.

Loads and renders the Jinja2 HTML templates shipped in this directory.
"""

from pathlib import Path

import jinja2

TEMPLATES_DIR = Path(__file__).parent  # Can be monkeypatched in tests


def render_template(template_name: str, **context: object) -> str:
    """Render a Jinja2 template from the templates directory with the given context.

    Args:
        template_name: The filename of the template (e.g., 'image.html.j2').
        **context: Variables to pass to the template.

    Returns:
        The rendered markup, ending with a newline.

    Raises:
        jinja2.exceptions.TemplateNotFound: If the template does not exist.
        jinja2.exceptions.UndefinedError: If a required variable is missing.
    """
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=jinja2.StrictUndefined,
        autoescape=True,
        keep_trailing_newline=True,
    )
    template = env.get_template(template_name)
    return str(template.render(**context))
