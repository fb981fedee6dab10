"""
HTTP layer.

``router.py`` aggregates the per-domain routers from ``endpoints``.
Screens of the web UI are served as JSON documents; form submissions
answer with ``303 See Other`` redirects to the page that shows the
result.
"""
