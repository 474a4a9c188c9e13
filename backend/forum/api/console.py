"""
Manual test console.

Serves one HTML page with a form per declared route. Submitting a form fills
path parameters from the matching fields, sends the remaining fields as query
string (GET) or JSON body (others), and shows the raw status and response.
Developer tool only; the page is generated from the route tables.
"""
import html
import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from forum.api.routes import Route

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{ font-family: sans-serif; display: flex; gap: 2em; }}
    #operations-list {{ flex: 1; list-style: none; padding: 0; }}
    .operation {{ border-bottom: 1px solid #ddd; padding: 0.5em 0; }}
    #response {{ flex: 1; position: sticky; top: 0; align-self: flex-start; }}
    pre {{ white-space: pre-wrap; background: #f6f6f6; padding: 1em; }}
  </style>
</head>
<body>
  <ul id="operations-list">{operations}</ul>
  <div id="response">
    <h2>Status: <span id="status-code"></span></h2>
    <pre id="response-text"></pre>
  </div>
  <script>
    const prefix = {prefix};
    async function submitOperation(event) {{
      event.preventDefault();
      const form = event.target;
      const data = Object.fromEntries(new FormData(form));
      const method = data.$method;
      let endpoint = data.$endpoint;
      delete data.$method;
      delete data.$endpoint;
      endpoint = endpoint.replace(/\\{{(\\w+)\\}}/g, (_, key) => {{
        const value = data[key];
        delete data[key];
        return encodeURIComponent(value);
      }});
      for (const [key, value] of Object.entries(data)) {{
        if (value === "") delete data[key];
      }}
      let body;
      if (method === "GET") {{
        const query = new URLSearchParams(data).toString();
        if (query) endpoint += "?" + query;
      }} else if (Object.keys(data).length > 0) {{
        body = JSON.stringify(data);
      }}
      document.querySelector("#status-code").textContent = "";
      document.querySelector("#response-text").textContent = "Loading...";
      const res = await fetch(prefix + endpoint, {{
        method,
        headers: {{ "Content-Type": "application/json" }},
        credentials: "same-origin",
        body,
      }});
      document.querySelector("#status-code").textContent = res.status;
      document.querySelector("#response-text").textContent = JSON.stringify(await res.json(), null, 2);
    }}
    document.querySelectorAll(".operation-form").forEach((f) => f.addEventListener("submit", submitOperation));
  </script>
</body>
</html>
"""


def _operation_html(route: Route) -> str:
    fields = "".join(
        f'<div class="field"><label>{html.escape(name)}: <input name="{html.escape(name)}"></label></div>'
        for name in route.fields
    )
    return (
        f'<li class="operation"><h3>{html.escape(route.name)}</h3>'
        f'<code>{route.method} {html.escape(route.path)}</code>'
        f'<form class="operation-form">'
        f'<input type="hidden" name="$endpoint" value="{html.escape(route.path)}">'
        f'<input type="hidden" name="$method" value="{route.method}">'
        f"{fields}<button type=\"submit\">Submit</button></form></li>"
    )


def render_console(routes: list[Route], prefix: str, title: str) -> str:
    return _PAGE.format(
        title=html.escape(title),
        operations="".join(_operation_html(r) for r in routes),
        prefix=json.dumps(prefix),
    )


def build_console_router(routes: list[Route], prefix: str, title: str) -> APIRouter:
    router = APIRouter(include_in_schema=False)
    page = render_console(routes, prefix, title)

    async def console():
        return HTMLResponse(page)

    router.add_api_route("/", console, methods=["GET"], response_class=HTMLResponse)
    return router
